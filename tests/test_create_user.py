import asyncio

from recipe_backend import create_user
from recipe_backend.database.services import users as user_service


def test_create_user_command(mock_db):
    assert create_user.main(["chef", "okay"]) == 0
    user = asyncio.run(user_service.find_by_username("chef"))
    assert user is not None
    assert user["password"] != "okay"


def test_create_user_command_rejects_duplicates(mock_db):
    assert create_user.main(["chef", "okay"]) == 0
    assert create_user.main(["chef", "other"]) == 1
    assert asyncio.run(mock_db["users"].count_documents({"username": "chef"})) == 1
