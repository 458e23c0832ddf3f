"""Pytest configuration and fixtures."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from recipe_backend.auth.jwt_handler import create_token
from recipe_backend.database import mongo
from recipe_backend.database.services import recipes as recipe_service
from recipe_backend.database.services import users as user_service
from recipe_backend.main import app


@pytest.fixture(autouse=True)
def mock_db(monkeypatch):
    """Swap the MongoDB collections for in-memory ones."""
    db = AsyncMongoMockClient()["recipes_test"]
    monkeypatch.setattr(mongo, "db", db)
    monkeypatch.setattr(mongo, "users_collection", db["users"])
    monkeypatch.setattr(mongo, "recipes_collection", db["recipes"])
    return db


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def admin_user(mock_db):
    return asyncio.run(user_service.create_user("admin", "okay"))


@pytest.fixture
def token(admin_user):
    return create_token(str(admin_user["_id"]), admin_user["username"])


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def saved_recipe(mock_db):
    return asyncio.run(
        recipe_service.save_recipe({"name": "chicken nuggets", "difficulty": 2, "vegetarian": True})
    )
