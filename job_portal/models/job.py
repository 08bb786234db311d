# job.py
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, true
from sqlalchemy.dialects import mysql

from job_portal.database import Base


# Microsecond precision so successive mutations always move updated_at forward.
PRECISE_DATETIME = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")

DEFAULT_SALARY_CURRENCY = "VND"
DEFAULT_JOB_TYPE = "Full-time"


def utc_now() -> datetime:
    # Stored naive, always UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    company = Column(String(150), nullable=False)
    location = Column(String(100), nullable=False)
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    salary_currency = Column(String(10), default=DEFAULT_SALARY_CURRENCY, server_default=DEFAULT_SALARY_CURRENCY)
    job_type = Column(String(50), default=DEFAULT_JOB_TYPE, server_default=DEFAULT_JOB_TYPE)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=True)
    benefits = Column(Text, nullable=True)
    contact_email = Column(String(100), nullable=False)
    contact_phone = Column(String(20), nullable=True)
    is_active = Column(Boolean, default=True, server_default=true(), nullable=False)
    created_at = Column(PRECISE_DATETIME, default=utc_now, nullable=False)
    updated_at = Column(PRECISE_DATETIME, default=utc_now, nullable=False)
