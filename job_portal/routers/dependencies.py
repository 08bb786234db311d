# dependencies.py
from typing import Any, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError as PydanticValidationError

from job_portal.config import Settings
from job_portal.errors import InvalidToken, Unauthenticated
from job_portal.schemas.auth import TokenPayload
from job_portal.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Stateless bearer check: the datastore is not consulted."""

    if not token:
        raise Unauthenticated("Access token required")
    payload = decode_access_token(token, settings)
    try:
        TokenPayload.model_validate(payload)
    except PydanticValidationError as exc:
        raise InvalidToken("Invalid token") from exc
    return payload
