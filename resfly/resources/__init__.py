from .base import Resource, build_resources
from .candidate import Candidate
from .job import Job, JobCategory, JobStatus, JobType, Salary, SalaryType
from .company import Company, CompanyType

__all__ = [
    "Resource", "build_resources",
    "Company", "CompanyType",
    "Job", "JobCategory", "JobStatus", "JobType", "Salary", "SalaryType",
    "Candidate",
]
