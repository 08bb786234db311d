# auth.py
import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from job_portal.config import Settings
from job_portal.database import get_db
from job_portal.errors import Unauthenticated, ValidationError
from job_portal.models.admin import Admin
from job_portal.routers.dependencies import get_app_settings, get_current_admin
from job_portal.schemas.auth import AdminRead, LoginRequest, LoginResponse, VerifyResponse
from job_portal.utils.jwt_handler import create_access_token
from job_portal.utils.password_hash import verify_password


router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
def login_admin(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    if not credentials.username or not credentials.password:
        raise ValidationError("Username và password là bắt buộc")

    admin = db.query(Admin).filter(Admin.username == credentials.username).first()
    if admin is None:
        raise Unauthenticated("Tài khoản không tồn tại")
    if not verify_password(credentials.password, admin.password):
        logger.info("auth.login rejected username=%s", admin.username)
        raise Unauthenticated("Mật khẩu không đúng")

    token = create_access_token({"id": admin.id, "username": admin.username}, settings)
    return LoginResponse(
        message="Đăng nhập thành công",
        token=token,
        admin=AdminRead.model_validate(admin),
    )


@router.get("/verify", response_model=VerifyResponse)
def verify_token(current_admin: dict[str, Any] = Depends(get_current_admin)) -> VerifyResponse:
    return VerifyResponse(message="Token hợp lệ", user=current_admin)
