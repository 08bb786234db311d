from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=False)


def parse_cors_origins(raw: Any) -> list[str]:
    """Return the allowed CORS origins.

    Unset or ``*`` allows every origin; otherwise a comma-separated list is expected.
    """

    if raw is None:
        return ["*"]
    if isinstance(raw, (list, tuple, set)):
        items = [str(item).strip() for item in raw]
    else:
        value = str(raw).strip()
        if not value or value == "*":
            return ["*"]
        items = [p.strip() for p in value.split(",")]
    origins = [item for item in items if item]
    return origins or ["*"]


class Settings(BaseSettings):
    app_name: str = Field(default="Job Portal API")
    version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5000, validation_alias="PORT")

    # Database configuration
    # Discrete DB_* variables are required in production; DB_URL overrides them
    # (sqlite for local runs and tests).
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    db_host: str | None = Field(default=None, validation_alias="DB_HOST")
    db_port: int | None = Field(default=None, validation_alias="DB_PORT")
    db_name: str | None = Field(default=None, validation_alias="DB_NAME")
    db_user: str | None = Field(default=None, validation_alias="DB_USER")
    db_password: str | None = Field(default=None, validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    # Connection pool
    db_pool_size: int = Field(default=20, validation_alias="DB_POOL_SIZE")
    db_pool_timeout: float = Field(default=2.0, validation_alias="DB_POOL_TIMEOUT")
    # Max connection age in seconds; older connections are reopened at checkout.
    db_pool_recycle: int = Field(default=3600, validation_alias="DB_POOL_RECYCLE")

    jwt_secret: str | None = Field(default=None, validation_alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_hours: int = Field(default=24, validation_alias="ACCESS_TOKEN_EXPIRE_HOURS")

    cors_origin: str | None = Field(default=None, validation_alias="CORS_ORIGIN")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("db_port", mode="before")
    @classmethod
    def _blank_port_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def cors_origins(self) -> list[str]:
        return parse_cors_origins(self.cors_origin)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def missing_required_settings(settings: Settings) -> list[str]:
    """Names of required environment variables that are absent or empty."""

    required: list[tuple[str, Any]] = []
    if not settings.db_url:
        required.extend(
            [
                ("DB_HOST", settings.db_host),
                ("DB_PORT", settings.db_port),
                ("DB_NAME", settings.db_name),
                ("DB_USER", settings.db_user),
                ("DB_PASSWORD", settings.db_password),
            ]
        )
    required.append(("JWT_SECRET", settings.jwt_secret))
    return [name for name, value in required if value is None or str(value) == ""]


def build_sqlalchemy_db_url(settings: Settings) -> str:
    # A full URL wins over the discrete components.
    if settings.db_url:
        return settings.db_url

    # NOTE: password may include special chars; safest is to rely on DB_URL for complex passwords.
    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )
