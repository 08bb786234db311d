# job.py
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class JobPayload(BaseModel):
    """Body of create and update requests.

    Every field is optional at the schema level; required-field and salary-range
    rules are enforced by the mutation service so the client receives the
    job-specific messages.
    """

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Optional[str] = None
    job_type: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _blank_salary_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class JobPublicItem(BaseModel):
    id: int
    title: str
    company: str
    location: str
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Optional[str] = None
    job_type: Optional[str] = None
    description: str
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    contact_email: str
    contact_phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobRead(JobPublicItem):
    is_active: bool


class PublicPagination(BaseModel):
    currentPage: int
    totalPages: int
    totalJobs: int
    hasNext: bool
    hasPrev: bool


class AdminPagination(BaseModel):
    currentPage: int
    totalPages: int
    totalJobs: int


class PublicJobListResponse(BaseModel):
    jobs: list[JobPublicItem]
    pagination: PublicPagination


class AdminJobListResponse(BaseModel):
    jobs: list[JobRead]
    pagination: AdminPagination


class JobMessageResponse(BaseModel):
    message: str
    job: JobRead


class MessageResponse(BaseModel):
    message: str
