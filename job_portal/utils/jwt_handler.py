# jwt_handler.py
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from job_portal.config import Settings
from job_portal.errors import InvalidToken


def create_access_token(
    data: dict[str, Any],
    settings: Settings,
    expires_delta: timedelta | None = None,
    *,
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.access_token_expire_hours)
    to_encode = data.copy()
    iat = int(issued_at.timestamp())
    to_encode["iat"] = iat
    to_encode["exp"] = iat + int(expires_delta.total_seconds())
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    if not token:
        raise InvalidToken("Invalid token")
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        # ExpiredSignatureError is a JWTError; expiry is just another invalid token here.
        raise InvalidToken("Invalid token") from exc
