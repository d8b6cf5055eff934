"""Shared fixtures: a mocked requests.Session returning real Response objects."""
from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from resfly.api import ResflyApi

BASE_URL = "https://api.test.resfly.com"
API_KEY = "test-key"


def make_http_response(status_code: int, payload: Any = None, text: str | None = None) -> requests.Response:
    """Build a requests.Response as the session would return it."""
    r = requests.Response()
    r.status_code = status_code
    if text is not None:
        r._content = text.encode("utf-8")
    elif payload is not None:
        r._content = json.dumps(payload).encode("utf-8")
    else:
        r._content = b""
    r.encoding = "utf-8"
    return r


def company_fields(**overrides: Any) -> dict[str, Any]:
    fields = {
        "id": 42,
        "date_created": "2012-01-01T00:00:00Z",
        "name": "ACME, Inc.",
        "type": "internal",
        "url": "http://www.acmeinc.com",
        "job_slots": 5,
        "job_slots_used": 1,
        "job_slots_available": 4,
    }
    fields.update(overrides)
    return fields


def job_fields(**overrides: Any) -> dict[str, Any]:
    fields = {
        "id": 7,
        "company_id": 42,
        "date_created": "2012-01-02T09:30:00Z",
        "title": "Marketing Specialist",
        "city": "Minneapolis",
        "state": "MN",
        "category": "marketing_public_relations",
        "description": "This a test description.",
        "type": "full_time",
        "salary": {"amount": 50000, "type": "yearly"},
        "detail_url": "https://jobs.acmeinc.com/7",
        "application_url": "https://jobs.acmeinc.com/7/apply",
        "status": "draft",
    }
    fields.update(overrides)
    return fields


def candidate_fields(**overrides: Any) -> dict[str, Any]:
    fields = {
        "id": 3,
        "first_name": "Pat",
        "last_name": "Doe",
        "email": "pat@example.com",
        "source": "indeed",
        "city": "St. Paul",
        "state": "MN",
        "resume_url": "https://files.resfly.com/resumes/3.pdf",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def session() -> MagicMock:
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = make_http_response(200, {})
    return mock_session


@pytest.fixture
def api(session: MagicMock) -> ResflyApi:
    return ResflyApi(BASE_URL, API_KEY, timeout=5, session=session)


def last_call(session: MagicMock) -> tuple[str, str, dict[str, Any]]:
    """(method, url, kwargs) of the most recent session.request call."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs


def sent_json(session: MagicMock) -> Any:
    _, _, kwargs = last_call(session)
    return json.loads(kwargs["data"])
