"""Job resource and its enumerations."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from resfly.log import get_logger
from resfly.resources.base import Resource, parse_timestamp
from resfly.resources.candidate import Candidate

log = get_logger(__name__)


class JobCategory:
    """Industry categories accepted by the API."""
    ACCOUNTING_FINANCE = "accounting_finance"
    ADMINISTRATIVE = "administrative"
    ARCHITECTURE_ENGINEERING = "architecture_engineering"
    ART_MEDIA_DESIGN = "art_media_design"
    BANKING_LOANS = "banking_loans"
    BIOTECH_PHARMACEUTICAL = "biotech_pharmaceutical"
    COMPUTER_SOFTWARE = "computer_software"
    CONSTRUCTION_FACILITIES = "construction_facilities"
    CUSTOMER_SERVICE = "customer_service"
    EDUCATION = "education"
    GENERAL_LABOR = "general_labor"
    GOVERNMENT_MILITARY = "government_military"
    HEALTHCARE = "healthcare"
    HOSPITALITY_TRAVEL = "hospitality_travel"
    HUMAN_RESOURCES = "human_resources"
    INFORMATION_TECHNOLOGY = "information_technology"
    LAW_ENFORCEMENT_SECURITY = "law_enforcement_security"
    LEGAL = "legal"
    MARKETING_PUBLIC_RELATIONS = "marketing_public_relations"
    REAL_ESTATE = "real_estate"
    RESTAURANT_FOOD_SERVICE = "restaurant_food_service"
    RETAIL = "retail"
    SALES = "sales"
    SCIENCE_RESEARCH = "science_research"
    TELECOMMUNICATIONS = "telecommunications"
    TRANSPORTATION_LOGISTICS = "transportation_logistics"
    VOLUNTEERING_NON_PROFIT = "volunteering_non_profit"
    WRITING_EDITING = "writing_editing"


class JobType:
    """Employment type constants."""
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    TEMP = "temp"
    VOLUNTEER = "volunteer"


class SalaryType:
    YEARLY = "yearly"
    HOURLY = "hourly"


class JobStatus:
    """Job status constants."""
    DRAFT = "draft"
    PUBLISHED = "published"
    CLOSED = "closed"


@dataclass(frozen=True)
class Salary:
    amount: float | int | None
    type: str | None = None

    @classmethod
    def from_api(cls, data: Any) -> Salary | None:
        if isinstance(data, Salary):
            return data
        if not isinstance(data, Mapping):
            return None
        return cls(amount=data.get("amount"), type=data.get("type"))

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.amount, "type": self.type}


class Job(Resource):
    """A job posting owned by a company.

    ``status`` is server-controlled: it only changes through :meth:`publish`,
    :meth:`close`, or a refresh from the API.
    """

    resource_key = "job"
    collection_path = "/jobs"

    _company_id: int | None = None
    _date_created: datetime | None = None
    _title: str | None = None
    _city: str | None = None
    _state: str | None = None
    _category: str | None = None
    _description: str | None = None
    _type: str | None = None
    _salary: Salary | None = None
    _detail_url: str | None = None
    _application_url: str | None = None
    _status: str | None = None

    def _set_from_api_data(self, fields: Mapping[str, Any]) -> None:
        self._set_id(fields)
        self._company_id = fields.get("company_id")
        self._date_created = parse_timestamp(fields.get("date_created"))
        self._status = fields.get("status")
        (self.set_title(fields.get("title"))
             .set_city(fields.get("city"))
             .set_state(fields.get("state"))
             .set_category(fields.get("category"))
             .set_description(fields.get("description"))
             .set_type(fields.get("type"))
             .set_salary(fields.get("salary"))
             .set_detail_url(fields.get("detail_url"))
             .set_application_url(fields.get("application_url")))

    def _to_fields(self) -> dict[str, Any]:
        return {
            "company_id": self._company_id,
            "title": self._title,
            "city": self._city,
            "state": self._state,
            "category": self._category,
            "description": self._description,
            "type": self._type,
            "salary": self._salary.to_dict() if self._salary else None,
            "detail_url": self._detail_url,
            "application_url": self._application_url,
        }

    @property
    def company_id(self) -> int | None:
        return self._company_id

    def set_company_id(self, company_id: int | None) -> Job:
        self._company_id = company_id
        return self

    @property
    def date_created(self) -> datetime | None:
        return self._date_created

    @property
    def title(self) -> str | None:
        return self._title

    def set_title(self, title: str | None) -> Job:
        self._title = title
        return self

    @property
    def city(self) -> str | None:
        return self._city

    def set_city(self, city: str | None) -> Job:
        self._city = city
        return self

    @property
    def state(self) -> str | None:
        return self._state

    def set_state(self, state: str | None) -> Job:
        self._state = state
        return self

    @property
    def category(self) -> str | None:
        return self._category

    def set_category(self, category: str | None) -> Job:
        self._category = category
        return self

    @property
    def description(self) -> str | None:
        return self._description

    def set_description(self, description: str | None) -> Job:
        self._description = description
        return self

    @property
    def type(self) -> str | None:
        return self._type

    def set_type(self, job_type: str | None) -> Job:
        self._type = job_type
        return self

    @property
    def salary(self) -> Salary | None:
        return self._salary

    def set_salary(self, salary: Salary | Mapping[str, Any] | None) -> Job:
        """Accepts a :class:`Salary` or a ``{"amount": ..., "type": ...}`` mapping."""
        self._salary = Salary.from_api(salary)
        return self

    @property
    def detail_url(self) -> str | None:
        return self._detail_url

    def set_detail_url(self, detail_url: str | None) -> Job:
        self._detail_url = detail_url
        return self

    @property
    def application_url(self) -> str | None:
        return self._application_url

    def set_application_url(self, application_url: str | None) -> Job:
        self._application_url = application_url
        return self

    @property
    def status(self) -> str | None:
        return self._status

    def publish(self) -> bool:
        if not self._put_action("publish"):
            return False
        self._status = JobStatus.PUBLISHED
        log.info("Published job %s", self._id)
        return True

    def close(self) -> bool:
        if not self._put_action("close"):
            return False
        self._status = JobStatus.CLOSED
        log.info("Closed job %s", self._id)
        return True

    def get_candidates(self) -> list[Candidate]:
        return self._fetch_related(Candidate, "candidates")
