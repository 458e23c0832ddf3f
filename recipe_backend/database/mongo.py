import motor.motor_asyncio

from recipe_backend.config import MONGO_URI, DATABASE_NAME

client = motor.motor_asyncio.AsyncIOMotorClient(MONGO_URI)
db = client[DATABASE_NAME]
users_collection = db["users"]
recipes_collection = db["recipes"]
