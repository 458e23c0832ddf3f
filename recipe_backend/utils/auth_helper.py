from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from passlib.context import CryptContext

from recipe_backend.auth.jwt_handler import decode_token

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: thiếu header cũng trả 403 "Unauthorized" như token sai
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # hash trong db bị hỏng hoặc không phải bcrypt
        return False


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """
    Bảo vệ các route thay đổi dữ liệu bằng Bearer token.
    Trả về payload của token (sub = user id, username).
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return payload
