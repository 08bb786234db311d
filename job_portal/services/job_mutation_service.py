# job_mutation_service.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from job_portal.errors import JOB_NOT_FOUND, NotFound, ValidationError
from job_portal.models.job import DEFAULT_JOB_TYPE, DEFAULT_SALARY_CURRENCY, Job, utc_now
from job_portal.schemas.job import JobPayload
from job_portal.services.job_query_service import is_valid_job_id


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "company", "location", "description", "contact_email")

MISSING_REQUIRED_MESSAGE = "Tiêu đề, công ty, địa điểm, mô tả và email liên hệ là bắt buộc"
SALARY_RANGE_MESSAGE = "Lương tối thiểu không được lớn hơn lương tối đa"
CREATED_MESSAGE = "Tạo công việc thành công"
UPDATED_MESSAGE = "Cập nhật công việc thành công"
DELETED_MESSAGE = "Xóa công việc thành công"
ACTIVATED_MESSAGE = "Kích hoạt công việc thành công"
DEACTIVATED_MESSAGE = "Vô hiệu hóa công việc thành công"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_job_payload(payload: JobPayload) -> None:
    if any(_is_blank(getattr(payload, name)) for name in REQUIRED_FIELDS):
        raise ValidationError(MISSING_REQUIRED_MESSAGE)
    if payload.salary_min is not None and payload.salary_max is not None:
        if payload.salary_min > payload.salary_max:
            raise ValidationError(SALARY_RANGE_MESSAGE)


def _column_values(payload: JobPayload) -> dict[str, Any]:
    # Full replace: optional fields not sent become NULL; a zero salary counts as absent.
    return {
        "title": payload.title,
        "company": payload.company,
        "location": payload.location,
        "salary_min": payload.salary_min or None,
        "salary_max": payload.salary_max or None,
        "salary_currency": payload.salary_currency or DEFAULT_SALARY_CURRENCY,
        "job_type": payload.job_type or DEFAULT_JOB_TYPE,
        "description": payload.description,
        "requirements": payload.requirements or None,
        "benefits": payload.benefits or None,
        "contact_email": payload.contact_email,
        "contact_phone": payload.contact_phone or None,
    }


def _get_job_or_404(db: Session, job_id: int) -> Job:
    if not is_valid_job_id(job_id):
        raise NotFound(JOB_NOT_FOUND)
    job = db.get(Job, job_id)
    if job is None:
        raise NotFound(JOB_NOT_FOUND)
    return job


def create_job(db: Session, payload: JobPayload) -> Job:
    validate_job_payload(payload)
    now = utc_now()
    job = Job(**_column_values(payload), is_active=True, created_at=now, updated_at=now)
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("job.create id=%s", job.id)
    return job


def update_job(db: Session, job_id: int, payload: JobPayload) -> Job:
    validate_job_payload(payload)
    job = _get_job_or_404(db, job_id)
    for column, value in _column_values(payload).items():
        setattr(job, column, value)
    job.is_active = True if payload.is_active is None else payload.is_active
    job.updated_at = utc_now()
    db.commit()
    db.refresh(job)
    logger.info("job.update id=%s", job.id)
    return job


def delete_job(db: Session, job_id: int) -> None:
    job = _get_job_or_404(db, job_id)
    db.delete(job)
    db.commit()
    logger.info("job.delete id=%s", job_id)


def toggle_job(db: Session, job_id: int) -> tuple[Job, str]:
    """Flip ``is_active`` and return the job with a message naming the new state."""

    job = _get_job_or_404(db, job_id)
    job.is_active = not job.is_active
    job.updated_at = utc_now()
    db.commit()
    db.refresh(job)
    logger.info("job.toggle id=%s is_active=%s", job.id, job.is_active)
    return job, ACTIVATED_MESSAGE if job.is_active else DEACTIVATED_MESSAGE
