"""Tests for the end-to-end walkthrough with a scripted API."""
from __future__ import annotations

import pytest
import requests

from conftest import candidate_fields, company_fields, job_fields, make_http_response
from resfly import walkthrough
from resfly.errors import TransportError


def test_full_run(api, session):
    session.request.side_effect = [
        make_http_response(201, {"company": company_fields()}),
        make_http_response(200, {"company": company_fields(name="ACME International, Inc.")}),
        make_http_response(201, {"job": job_fields()}),
        make_http_response(200, {}),
        make_http_response(200, {"jobs": [{"job": job_fields()}]}),
        make_http_response(200, {"candidates": [{"candidate": candidate_fields()}]}),
        make_http_response(200, {}),
        make_http_response(204),
        make_http_response(200, {}),
        make_http_response(400, {"errors": [{"error": "Name is required"}]}),
    ]

    result = walkthrough.run(api)

    assert result["company_id"] == 42
    assert result["job_id"] == 7
    assert result["job_status"] == "closed"
    assert result["company_jobs"] == ["Marketing Specialist"]
    assert result["candidates"] == ["Pat Doe"]
    assert result["job_deleted"] is True
    assert result["company_suspended"] is True
    assert result["errors"] == ["Name is required"]

    methods = [call.args[0] for call in session.request.call_args_list]
    assert methods == ["POST", "PUT", "POST", "PUT", "GET", "GET", "PUT", "DELETE", "PUT", "POST"]


def test_stops_when_company_cannot_be_created(api, session):
    session.request.return_value = make_http_response(401, {"errors": [{"error": "Invalid API key"}]})

    result = walkthrough.run(api)

    assert result["company_id"] is None
    assert result["errors"] == ["Invalid API key"]
    assert session.request.call_count == 1


def test_transport_error_propagates(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(TransportError):
        walkthrough.run(api)
