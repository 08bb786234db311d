# stats_service.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from job_portal.models.job import Job
from job_portal.schemas.admin import AdminStatsResponse, JobTypeCount, RecentJob


RECENT_JOBS_LIMIT = 5


def build_admin_stats(db: Session) -> AdminStatsResponse:
    total_jobs = int(db.query(func.count(Job.id)).scalar() or 0)
    active_jobs = int(db.query(func.count(Job.id)).filter(Job.is_active.is_(True)).scalar() or 0)
    inactive_jobs = int(db.query(func.count(Job.id)).filter(Job.is_active.is_(False)).scalar() or 0)

    by_type_rows = (
        db.query(Job.job_type, func.count(Job.id).label("c"))
        .filter(Job.is_active.is_(True))
        .group_by(Job.job_type)
        .all()
    )
    jobs_by_type = [JobTypeCount(job_type=job_type, count=int(c)) for job_type, c in by_type_rows]

    recent_rows = (
        db.query(Job.id, Job.title, Job.company, Job.created_at)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .limit(RECENT_JOBS_LIMIT)
        .all()
    )
    recent_jobs = [
        RecentJob(id=job_id, title=title, company=company, created_at=created_at)
        for job_id, title, company, created_at in recent_rows
    ]

    return AdminStatsResponse(
        totalJobs=total_jobs,
        activeJobs=active_jobs,
        inactiveJobs=inactive_jobs,
        jobsByType=jobs_by_type,
        recentJobs=recent_jobs,
    )
