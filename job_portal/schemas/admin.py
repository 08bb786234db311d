from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class JobTypeCount(BaseModel):
    job_type: str | None
    count: int


class RecentJob(BaseModel):
    id: int
    title: str
    company: str
    created_at: datetime


class AdminStatsResponse(BaseModel):
    totalJobs: int
    activeJobs: int
    inactiveJobs: int
    jobsByType: list[JobTypeCount]
    recentJobs: list[RecentJob]
