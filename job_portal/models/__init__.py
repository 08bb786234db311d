# __init__.py
from job_portal.models.admin import Admin
from job_portal.models.job import Job

__all__ = [
	"Admin",
	"Job",
]
