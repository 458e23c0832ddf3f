"""
Provision a login account.

    recipe-backend-create-user USERNAME PASSWORD
"""
import argparse
import asyncio
import logging

from pymongo.errors import DuplicateKeyError

from recipe_backend.config import LOG_LEVEL
from recipe_backend.database.services import users as user_service

logger = logging.getLogger(__name__)


async def _create(username: str, password: str) -> int:
    await user_service.ensure_indexes()
    try:
        user = await user_service.create_user(username, password)
    except DuplicateKeyError:
        logger.error("User %s already exists", username)
        return 1
    logger.info("Created user %s (%s)", username, user["_id"])
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a user that can sign in to the recipe API.")
    parser.add_argument("username")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    if not args.username or not args.password:
        parser.error("username or password can not be empty")
    return asyncio.run(_create(args.username, args.password))


if __name__ == "__main__":
    raise SystemExit(main())
