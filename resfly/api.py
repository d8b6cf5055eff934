"""Top-level client for the Resfly REST API."""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

import requests

from resfly.config import DEFAULT_TIMEOUT, ClientSettings, load_settings
from resfly.log import get_logger
from resfly.resources import Candidate, Company, Job, Resource, build_resources
from resfly.response import Response
from resfly.transport import Transport

log = get_logger(__name__)

R = TypeVar("R", bound=Resource)


class ResflyApi:
    """Entry point: owns the transport and the accumulated API errors.

    Errors reported by the API (a top-level ``errors`` list in any response)
    are appended to :meth:`get_errors` and kept across calls until
    :meth:`clear_errors` is called.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.transport = Transport(url, api_key, timeout=timeout, session=session)
        self._errors: list[str] = []

    @classmethod
    def from_settings(cls, settings: ClientSettings, session: requests.Session | None = None) -> ResflyApi:
        return cls(settings.api_url, settings.api_key, timeout=settings.timeout, session=session)

    @classmethod
    def from_env(cls, config_path: str | None = None) -> ResflyApi:
        """Build a client from RESFLY_* env vars and an optional YAML file."""
        return cls.from_settings(load_settings(config_path))

    @property
    def url(self) -> str:
        return self.transport.base_url

    def make_request(self, path: str, method: str, data: dict[str, Any] | None = None) -> Response:
        response = self.transport.request(path, method, data)
        errors = response.errors
        if errors:
            log.debug("%s %s reported %d error(s)", method.upper(), path, len(errors))
            self._errors.extend(errors)
        return response

    def get_errors(self) -> list[str]:
        return list(self._errors)

    def clear_errors(self) -> None:
        self._errors.clear()

    def _get_one(self, cls: type[R], item_id: int) -> R | None:
        response = self.make_request(f"{cls.collection_path}/{item_id}", "GET")
        if response.status_code != 200 or not isinstance(response.data, Mapping):
            return None
        fields = cls._unwrap(response.data)
        if fields.get("id") in (None, ""):
            log.debug("GET %s/%s returned no %s record", cls.collection_path, item_id, cls.resource_key)
            return None
        return cls.from_api(self, fields)

    def _get_all(self, cls: type[R], list_key: str) -> list[R]:
        response = self.make_request(cls.collection_path, "GET")
        if response.status_code != 200:
            return []
        return build_resources(self, cls, response.data, list_key)

    def get_company(self, company_id: int) -> Company | None:
        return self._get_one(Company, company_id)

    def get_companies(self) -> list[Company]:
        return self._get_all(Company, "companies")

    def get_job(self, job_id: int) -> Job | None:
        return self._get_one(Job, job_id)

    def get_jobs(self) -> list[Job]:
        return self._get_all(Job, "jobs")

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        return self._get_one(Candidate, candidate_id)

    def get_candidates(self) -> list[Candidate]:
        return self._get_all(Candidate, "candidates")
