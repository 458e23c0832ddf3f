# Đăng nhập bằng username/password, trả về Bearer token để gọi các route cần xác thực
import logging
from typing import Optional

from fastapi import APIRouter, Body, HTTPException

from recipe_backend.auth.jwt_handler import create_token
from recipe_backend.database.services import users as user_service
from recipe_backend.models.user_model import LoginResponse
from recipe_backend.utils.auth_helper import verify_password
from recipe_backend.utils.user_helper import user_helper

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: Optional[dict] = Body(default=None)):
    credentials = credentials or {}
    username = credentials.get("username")
    password = credentials.get("password")
    if not (isinstance(username, str) and isinstance(password, str)) or not username or not password:
        raise HTTPException(status_code=400, detail="username or password can not be empty")

    try:
        found = await user_service.find_by_username(username)
    except Exception:
        logger.exception("User lookup failed for %s", username)
        raise HTTPException(status_code=500, detail="login failed.")

    # cùng một thông báo cho cả hai trường hợp, không tiết lộ trường nào sai
    if not found or not verify_password(password, found.get("password", "")):
        logger.info("Rejected login for %s", username)
        raise HTTPException(status_code=400, detail="Incorrect username or password")

    user = user_helper(found)
    logger.info("User %s signed in", user["username"])
    return {
        "success": True,
        "accessToken": create_token(user["id"], user["username"]),
        "data": user,
    }
