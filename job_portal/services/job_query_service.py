# job_query_service.py
from __future__ import annotations

import math
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from job_portal.errors import JOB_NOT_FOUND, NotFound
from job_portal.models.job import Job
from job_portal.schemas.job import (
    AdminJobListResponse,
    AdminPagination,
    JobPublicItem,
    JobRead,
    PublicJobListResponse,
    PublicPagination,
)


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit inside a signed 64-bit OFFSET.
MAX_PAGE = (2**63 - 1) // MAX_LIMIT
# Upper bound of the INTEGER id column.
MAX_JOB_ID = 2**31 - 1


def _parse_int(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def sanitize_page(raw: Any) -> int:
    page = _parse_int(raw)
    if page is None or page < 1 or page > MAX_PAGE:
        return DEFAULT_PAGE
    return page


def sanitize_limit(raw: Any) -> int:
    limit = _parse_int(raw)
    if limit is None or limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def _filter_search(query: Query, search: str | None) -> Query:
    if not search:
        return query
    pattern = f"%{search}%"
    return query.filter(or_(Job.title.ilike(pattern), Job.company.ilike(pattern)))


def _newest_first(query: Query) -> Query:
    return query.order_by(Job.created_at.desc(), Job.id.desc())


def list_public_jobs(
    db: Session,
    *,
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
    page: Any = None,
    limit: Any = None,
) -> PublicJobListResponse:
    page_int = sanitize_page(page)
    limit_int = sanitize_limit(limit)

    filtered = _filter_search(db.query(Job).filter(Job.is_active.is_(True)), search)
    if location:
        filtered = filtered.filter(Job.location.ilike(f"%{location}%"))
    if job_type:
        filtered = filtered.filter(Job.job_type == job_type)

    # Page and count are separate reads; a concurrent write may skew them slightly.
    rows = _newest_first(filtered).offset((page_int - 1) * limit_int).limit(limit_int).all()
    total = filtered.order_by(None).count()
    pages = total_pages(total, limit_int)

    return PublicJobListResponse(
        jobs=[JobPublicItem.model_validate(row) for row in rows],
        pagination=PublicPagination(
            currentPage=page_int,
            totalPages=pages,
            totalJobs=total,
            hasNext=page_int < pages,
            hasPrev=page_int > 1,
        ),
    )


def list_admin_jobs(
    db: Session,
    *,
    search: str | None = None,
    page: Any = None,
    limit: Any = None,
) -> AdminJobListResponse:
    page_int = sanitize_page(page)
    limit_int = sanitize_limit(limit)

    filtered = _filter_search(db.query(Job), search)
    rows = _newest_first(filtered).offset((page_int - 1) * limit_int).limit(limit_int).all()
    total = filtered.order_by(None).count()

    return AdminJobListResponse(
        jobs=[JobRead.model_validate(row) for row in rows],
        pagination=AdminPagination(
            currentPage=page_int,
            totalPages=total_pages(total, limit_int),
            totalJobs=total,
        ),
    )


def is_valid_job_id(job_id: int) -> bool:
    return 1 <= job_id <= MAX_JOB_ID


def get_public_job(db: Session, job_id: int) -> Job:
    if not is_valid_job_id(job_id):
        raise NotFound(JOB_NOT_FOUND)
    job = db.query(Job).filter(Job.id == job_id, Job.is_active.is_(True)).first()
    if job is None:
        raise NotFound(JOB_NOT_FOUND)
    return job


def get_admin_job(db: Session, job_id: int) -> Job:
    if not is_valid_job_id(job_id):
        raise NotFound(JOB_NOT_FOUND)
    job = db.get(Job, job_id)
    if job is None:
        raise NotFound(JOB_NOT_FOUND)
    return job
