"""Single-request HTTP transport for the Resfly REST API."""
from __future__ import annotations

import json
from typing import Any

import requests

from resfly.config import DEFAULT_TIMEOUT
from resfly.errors import TransportError
from resfly.log import get_logger
from resfly.response import Response

log = get_logger(__name__)

METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})
_BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT"})


class Transport:
    """Issues one authenticated JSON request per call.

    Every request carries ``X-Api-Key`` and ``Accept: application/json``.
    POST and PUT bodies are JSON-encoded. Connection failures and timeouts
    raise :class:`TransportError`; any HTTP status, including 4xx/5xx, comes
    back as a :class:`Response`.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, method: str) -> dict[str, str]:
        headers = {
            "X-Api-Key": self.api_key,
            "Accept": "application/json",
        }
        if method in _BODY_METHODS:
            headers["Content-Type"] = "application/json"
        return headers

    def request(self, path: str, method: str, body: dict[str, Any] | None = None) -> Response:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.base_url}{path}"
        kwargs: dict[str, Any] = {
            "headers": self._headers(method),
            "timeout": self.timeout,
        }
        if method in _BODY_METHODS:
            # None is sent as a literal JSON null
            kwargs["data"] = json.dumps(body)

        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            log.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(method, url, str(exc)) from exc

        log.debug("%s %s -> %d", method, path, r.status_code)
        return Response(status_code=r.status_code, body=r.text, data=_parse_json(r))


def _parse_json(r: requests.Response) -> dict[str, Any] | None:
    if not r.content:
        return None
    try:
        data = r.json()
    except ValueError:
        log.debug("Response body is not valid JSON (status %d)", r.status_code)
        return None
    if not isinstance(data, dict):
        log.debug("Ignoring non-object JSON body (%s)", type(data).__name__)
        return None
    return data
