"""Candidate resource. Candidates enter the system by applying, so they
can be updated and deleted here but never created."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from resfly.resources.base import Resource

if TYPE_CHECKING:
    from resfly.resources.job import Job


class Candidate(Resource):
    resource_key = "candidate"
    collection_path = "/candidates"
    can_create = False

    _first_name: str | None = None
    _last_name: str | None = None
    _email: str | None = None
    _source: str | None = None
    _city: str | None = None
    _state: str | None = None
    _resume_url: str | None = None

    def _set_from_api_data(self, fields: Mapping[str, Any]) -> None:
        self._set_id(fields)
        self._resume_url = fields.get("resume_url")
        (self.set_first_name(fields.get("first_name"))
             .set_last_name(fields.get("last_name"))
             .set_email(fields.get("email"))
             .set_source(fields.get("source"))
             .set_city(fields.get("city"))
             .set_state(fields.get("state")))

    def _to_fields(self) -> dict[str, Any]:
        return {
            "first_name": self._first_name,
            "last_name": self._last_name,
            "email": self._email,
            "source": self._source,
            "city": self._city,
            "state": self._state,
        }

    @property
    def first_name(self) -> str | None:
        return self._first_name

    def set_first_name(self, first_name: str | None) -> Candidate:
        self._first_name = first_name
        return self

    @property
    def last_name(self) -> str | None:
        return self._last_name

    def set_last_name(self, last_name: str | None) -> Candidate:
        self._last_name = last_name
        return self

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self._first_name, self._last_name) if p)

    @property
    def email(self) -> str | None:
        return self._email

    def set_email(self, email: str | None) -> Candidate:
        self._email = email
        return self

    @property
    def source(self) -> str | None:
        return self._source

    def set_source(self, source: str | None) -> Candidate:
        self._source = source
        return self

    @property
    def city(self) -> str | None:
        return self._city

    def set_city(self, city: str | None) -> Candidate:
        self._city = city
        return self

    @property
    def state(self) -> str | None:
        return self._state

    def set_state(self, state: str | None) -> Candidate:
        self._state = state
        return self

    @property
    def resume_url(self) -> str | None:
        return self._resume_url

    def get_jobs(self) -> list[Job]:
        from resfly.resources.job import Job

        return self._fetch_related(Job, "jobs")
