"""Tests for the HTTP transport and the Response value object."""
from __future__ import annotations

import dataclasses
from unittest.mock import MagicMock

import pytest
import requests

from conftest import API_KEY, BASE_URL, last_call, make_http_response, sent_json
from resfly.errors import TransportError
from resfly.response import Response
from resfly.transport import Transport


@pytest.fixture
def transport(session: MagicMock) -> Transport:
    return Transport(BASE_URL + "/", API_KEY, timeout=5, session=session)


class TestRequestBuilding:

    def test_get_sends_auth_and_accept_headers(self, transport, session):
        transport.request("/companies", "GET")

        method, url, kwargs = last_call(session)
        assert method == "GET"
        assert url == f"{BASE_URL}/companies"
        assert kwargs["headers"] == {"X-Api-Key": API_KEY, "Accept": "application/json"}
        assert kwargs["timeout"] == 5
        assert "data" not in kwargs

    def test_post_sends_json_body(self, transport, session):
        body = {"company": {"name": "ACME, Inc."}}
        transport.request("/companies", "POST", body)

        method, _, kwargs = last_call(session)
        assert method == "POST"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert sent_json(session) == body

    def test_put_without_body_sends_json_null(self, transport, session):
        transport.request("/jobs/7/publish", "PUT")

        _, _, kwargs = last_call(session)
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["data"] == "null"

    def test_delete_has_no_body(self, transport, session):
        transport.request("/jobs/7", "delete")

        method, _, kwargs = last_call(session)
        assert method == "DELETE"
        assert "data" not in kwargs
        assert "Content-Type" not in kwargs["headers"]

    def test_unsupported_method_rejected(self, transport, session):
        with pytest.raises(ValueError):
            transport.request("/jobs", "PATCH")
        session.request.assert_not_called()


class TestResponseParsing:

    def test_status_body_and_data_captured(self, transport, session):
        session.request.return_value = make_http_response(201, {"company": {"id": 42}})

        response = transport.request("/companies", "POST", {})

        assert response.status_code == 201
        assert response.data == {"company": {"id": 42}}
        assert '"id": 42' in response.body

    def test_malformed_json_yields_none_data(self, transport, session):
        session.request.return_value = make_http_response(500, text="<html>oops</html>")

        response = transport.request("/companies", "GET")

        assert response.status_code == 500
        assert response.body == "<html>oops</html>"
        assert response.data is None

    def test_empty_body_yields_none_data(self, transport, session):
        session.request.return_value = make_http_response(204)

        response = transport.request("/jobs/7", "DELETE")

        assert response.status_code == 204
        assert response.body == ""
        assert response.data is None

    def test_non_object_json_yields_none_data(self, transport, session):
        session.request.return_value = make_http_response(200, [1, 2, 3])

        assert transport.request("/jobs", "GET").data is None


class TestTransportFailures:

    def test_connection_error_raises_transport_error(self, transport, session):
        session.request.side_effect = requests.ConnectionError("name resolution failed")

        with pytest.raises(TransportError) as exc_info:
            transport.request("/companies", "GET")

        assert exc_info.value.method == "GET"
        assert exc_info.value.url == f"{BASE_URL}/companies"
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_timeout_raises_transport_error(self, transport, session):
        session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError, match="read timed out"):
            transport.request("/jobs", "GET")


class TestResponse:

    def test_is_immutable(self):
        response = Response(status_code=200, body="{}", data={})
        with pytest.raises(dataclasses.FrozenInstanceError):
            response.status_code = 500  # type: ignore[misc]

    def test_errors_from_error_objects(self):
        data = {"errors": [{"error": "Name is required"}, {"message": "Type is invalid"}, "Slots exceeded"]}
        response = Response(status_code=400, body="", data=data)
        assert response.errors == ["Name is required", "Type is invalid", "Slots exceeded"]

    def test_no_errors_without_data(self):
        assert Response(status_code=502, body="Bad Gateway").errors == []
