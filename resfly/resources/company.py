"""Company resource."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from resfly.resources.base import Resource, parse_timestamp
from resfly.resources.job import Job


class CompanyType:
    """Company type constants."""
    INTERNAL = "internal"
    AGENCY = "agency"


class Company(Resource):
    resource_key = "company"
    collection_path = "/companies"

    _date_created: datetime | None = None
    _name: str | None = None
    _type: str | None = None
    _url: str | None = None
    _job_slots: int | None = None
    _job_slots_used: int | None = None
    _job_slots_available: int | None = None

    def _set_from_api_data(self, fields: Mapping[str, Any]) -> None:
        self._set_id(fields)
        self._date_created = parse_timestamp(fields.get("date_created"))
        self._job_slots_used = fields.get("job_slots_used")
        self._job_slots_available = fields.get("job_slots_available")
        (self.set_name(fields.get("name"))
             .set_type(fields.get("type"))
             .set_url(fields.get("url"))
             .set_job_slots(fields.get("job_slots")))

    def _to_fields(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "type": self._type,
            "url": self._url,
            "job_slots": self._job_slots,
        }

    @property
    def date_created(self) -> datetime | None:
        return self._date_created

    @property
    def name(self) -> str | None:
        return self._name

    def set_name(self, name: str | None) -> Company:
        self._name = name
        return self

    @property
    def type(self) -> str | None:
        return self._type

    def set_type(self, company_type: str | None) -> Company:
        self._type = company_type
        return self

    @property
    def url(self) -> str | None:
        return self._url

    def set_url(self, url: str | None) -> Company:
        self._url = url
        return self

    @property
    def job_slots(self) -> int | None:
        return self._job_slots

    def set_job_slots(self, job_slots: int | None) -> Company:
        self._job_slots = job_slots
        return self

    @property
    def job_slots_used(self) -> int | None:
        """Slots currently taken by published jobs (server-maintained)."""
        return self._job_slots_used

    @property
    def job_slots_available(self) -> int | None:
        return self._job_slots_available

    def suspend(self) -> bool:
        """Suspend the company; the API also closes its published jobs."""
        return self._put_action("suspend")

    def get_jobs(self) -> list[Job]:
        return self._fetch_related(Job, "jobs")
