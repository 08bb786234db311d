from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from job_portal.database import get_db
from job_portal.schemas.job import JobRead, PublicJobListResponse
from job_portal.services.job_query_service import get_public_job, list_public_jobs


router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=PublicJobListResponse)
def list_jobs(
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
    # Raw strings: malformed values fall back to defaults instead of a 400.
    page: str | None = None,
    limit: str | None = None,
    db: Session = Depends(get_db),
) -> PublicJobListResponse:
    return list_public_jobs(
        db,
        search=search,
        location=location,
        job_type=job_type,
        page=page,
        limit=limit,
    )


@router.get("/{job_id}", response_model=JobRead)
def get_job(job_id: int, db: Session = Depends(get_db)) -> JobRead:
    return JobRead.model_validate(get_public_job(db, job_id))
