# auth.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    # Optional so that a missing field yields the login-specific 400 message.
    username: Optional[str] = None
    password: Optional[str] = None


class AdminRead(BaseModel):
    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    message: str
    token: str
    admin: AdminRead


class TokenPayload(BaseModel):
    id: int
    username: str
    iat: Optional[int] = None
    exp: Optional[int] = None

    model_config = ConfigDict(extra="allow")


class VerifyResponse(BaseModel):
    message: str
    user: dict[str, Any]
