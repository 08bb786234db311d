from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    status: str
    message: str


@router.get("/health", response_model=HealthStatus, summary="Liveness probe")
def health_check() -> HealthStatus:
    return HealthStatus(status="OK", message="Server is running")
