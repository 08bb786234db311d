from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from job_portal.database import get_db
from job_portal.routers.dependencies import get_current_admin
from job_portal.schemas.admin import AdminStatsResponse
from job_portal.schemas.job import (
    AdminJobListResponse,
    JobMessageResponse,
    JobPayload,
    JobRead,
    MessageResponse,
)
from job_portal.services import job_mutation_service as mutations
from job_portal.services.job_query_service import get_admin_job, list_admin_jobs
from job_portal.services.stats_service import build_admin_stats


# Every route here sits behind the bearer-token gate.
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(get_current_admin)])

logger = logging.getLogger(__name__)


@router.get("/jobs", response_model=AdminJobListResponse)
def admin_list_jobs(
    search: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    db: Session = Depends(get_db),
) -> AdminJobListResponse:
    return list_admin_jobs(db, search=search, page=page, limit=limit)


@router.post("/jobs", response_model=JobMessageResponse, status_code=status.HTTP_201_CREATED)
def admin_create_job(
    payload: JobPayload,
    db: Session = Depends(get_db),
    current_admin: dict[str, Any] = Depends(get_current_admin),
) -> JobMessageResponse:
    job = mutations.create_job(db, payload)
    logger.info("admin.jobs.create admin=%s job_id=%s", current_admin.get("username"), job.id)
    return JobMessageResponse(message=mutations.CREATED_MESSAGE, job=JobRead.model_validate(job))


@router.get("/jobs/{job_id}", response_model=JobRead)
def admin_get_job(job_id: int, db: Session = Depends(get_db)) -> JobRead:
    return JobRead.model_validate(get_admin_job(db, job_id))


@router.put("/jobs/{job_id}", response_model=JobMessageResponse)
def admin_update_job(job_id: int, payload: JobPayload, db: Session = Depends(get_db)) -> JobMessageResponse:
    job = mutations.update_job(db, job_id, payload)
    return JobMessageResponse(message=mutations.UPDATED_MESSAGE, job=JobRead.model_validate(job))


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
def admin_delete_job(job_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    mutations.delete_job(db, job_id)
    return MessageResponse(message=mutations.DELETED_MESSAGE)


@router.patch("/jobs/{job_id}/toggle", response_model=JobMessageResponse)
def admin_toggle_job(job_id: int, db: Session = Depends(get_db)) -> JobMessageResponse:
    job, message = mutations.toggle_job(db, job_id)
    return JobMessageResponse(message=message, job=JobRead.model_validate(job))


@router.get("/stats", response_model=AdminStatsResponse)
def get_admin_stats(db: Session = Depends(get_db)) -> AdminStatsResponse:
    return build_admin_stats(db)
