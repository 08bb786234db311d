# __init__.py
from job_portal.schemas.admin import AdminStatsResponse, JobTypeCount, RecentJob
from job_portal.schemas.auth import AdminRead, LoginRequest, LoginResponse, TokenPayload, VerifyResponse
from job_portal.schemas.job import (
	AdminJobListResponse,
	JobMessageResponse,
	JobPayload,
	JobPublicItem,
	JobRead,
	MessageResponse,
	PublicJobListResponse,
)

__all__ = [
	"AdminStatsResponse",
	"JobTypeCount",
	"RecentJob",
	"AdminRead",
	"LoginRequest",
	"LoginResponse",
	"TokenPayload",
	"VerifyResponse",
	"AdminJobListResponse",
	"JobMessageResponse",
	"JobPayload",
	"JobPublicItem",
	"JobRead",
	"MessageResponse",
	"PublicJobListResponse",
]
