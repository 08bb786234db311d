# admin.py
from sqlalchemy import Column, Integer, String

from job_portal.database import Base
from job_portal.models.job import PRECISE_DATETIME, utc_now


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    created_at = Column(PRECISE_DATETIME, default=utc_now, nullable=False)
