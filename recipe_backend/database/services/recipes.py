"""
Recipe collection access.

Ids that are not valid ObjectIds are treated like ids that do not exist:
the lookups return None instead of raising.
"""
from bson import ObjectId
from pymongo import ReturnDocument

from recipe_backend.database import mongo


def _object_id(recipe_id: str):
    if not ObjectId.is_valid(recipe_id):
        return None
    return ObjectId(recipe_id)


async def save_recipe(recipe: dict) -> dict:
    doc = dict(recipe)
    result = await mongo.recipes_collection.insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


async def all_recipes() -> list:
    cursor = mongo.recipes_collection.find({})
    return await cursor.to_list(length=None)


async def fetch_by_id(recipe_id: str):
    oid = _object_id(recipe_id)
    if oid is None:
        return None
    return await mongo.recipes_collection.find_one({"_id": oid})


async def fetch_by_id_and_update(recipe_id: str, changes: dict):
    oid = _object_id(recipe_id)
    if oid is None:
        return None
    return await mongo.recipes_collection.find_one_and_update(
        {"_id": oid},
        {"$set": changes},
        return_document=ReturnDocument.AFTER,
    )


async def fetch_by_id_and_delete(recipe_id: str):
    oid = _object_id(recipe_id)
    if oid is None:
        return None
    return await mongo.recipes_collection.find_one_and_delete({"_id": oid})
