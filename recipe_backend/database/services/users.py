from pymongo import ASCENDING

from recipe_backend.database import mongo
from recipe_backend.utils.auth_helper import get_password_hash


async def find_by_username(username: str):
    return await mongo.users_collection.find_one({"username": username})


async def create_user(username: str, password: str) -> dict:
    user = {"username": username, "password": get_password_hash(password)}
    result = await mongo.users_collection.insert_one(user)
    user["_id"] = result.inserted_id
    return user


async def ensure_indexes() -> None:
    await mongo.users_collection.create_index([("username", ASCENDING)], unique=True)
