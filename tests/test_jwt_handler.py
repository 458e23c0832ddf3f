from datetime import datetime, timedelta, timezone

from jose import jwt

from recipe_backend.auth import jwt_handler


def test_token_round_trip():
    token = jwt_handler.create_token("64b7f0c2a1b2c3d4e5f60718", "admin")
    payload = jwt_handler.decode_token(token)
    assert payload["sub"] == "64b7f0c2a1b2c3d4e5f60718"
    assert payload["username"] == "admin"


def test_garbage_token_is_rejected():
    assert jwt_handler.decode_token("h89dyf87sduf89eu93d3d3dsafjk") is None


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "someone"}, "another-key", algorithm=jwt_handler.ALGORITHM)
    assert jwt_handler.decode_token(token) is None


def test_expired_token_is_rejected():
    payload = {"sub": "someone", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)}
    token = jwt.encode(payload, jwt_handler.SECRET_KEY, algorithm=jwt_handler.ALGORITHM)
    assert jwt_handler.decode_token(token) is None


def test_token_without_subject_is_rejected():
    token = jwt.encode({"username": "admin"}, jwt_handler.SECRET_KEY, algorithm=jwt_handler.ALGORITHM)
    assert jwt_handler.decode_token(token) is None
