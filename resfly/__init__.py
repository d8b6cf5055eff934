"""Python client for the Resfly recruiting API."""

from .api import ResflyApi
from .config import ClientSettings, load_settings
from .errors import ConfigError, ResflyError, TransportError
from .resources import (
    Candidate,
    Company,
    CompanyType,
    Job,
    JobCategory,
    JobStatus,
    JobType,
    Salary,
    SalaryType,
)
from .response import Response

__all__ = [
    "ResflyApi",
    "ClientSettings",
    "load_settings",
    "ResflyError",
    "TransportError",
    "ConfigError",
    "Response",
    "Company",
    "CompanyType",
    "Job",
    "JobCategory",
    "JobStatus",
    "JobType",
    "Salary",
    "SalaryType",
    "Candidate",
]
