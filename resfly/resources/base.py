"""Shared behaviour for API-backed resources."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from resfly.log import get_logger

if TYPE_CHECKING:
    from resfly.api import ResflyApi

log = get_logger(__name__)

R = TypeVar("R", bound="Resource")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as sent by the API (``...Z`` allowed)."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        log.debug("Unparseable timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        # timestamps without an offset are UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_resources(
    api: ResflyApi, cls: type[R], data: Mapping[str, Any] | None, list_key: str
) -> list[R]:
    """Turn the ``list_key`` array of a collection payload into resources."""
    if not data:
        return []
    entries = data.get(list_key)
    if not isinstance(entries, list):
        if entries is not None:
            log.debug("Expected a list under %r, got %s", list_key, type(entries).__name__)
        return []
    return [cls.from_api(api, entry) for entry in entries if isinstance(entry, Mapping)]


class Resource(ABC):
    """A JSON resource wrapped under ``resource_key`` on the wire.

    Subclasses map wire fields to attributes in :meth:`_set_from_api_data`
    and back in :meth:`_to_fields`. ``save`` replaces every field with what
    the server returns, so the server stays authoritative after a write.
    """

    resource_key: str = ""
    collection_path: str = ""
    can_create: bool = True

    def __init__(self, api: ResflyApi, data: Mapping[str, Any] | None = None) -> None:
        self._api = api
        self._id: int | None = None
        if data:
            self._set_from_api_data(self._unwrap(data))

    @classmethod
    def from_api(cls: type[R], api: ResflyApi, data: Mapping[str, Any]) -> R:
        """Build a resource from a wrapped (``{"job": {...}}``) or bare payload."""
        return cls(api, data)

    @classmethod
    def _unwrap(cls, data: Mapping[str, Any]) -> Mapping[str, Any]:
        inner = data.get(cls.resource_key)
        if isinstance(inner, Mapping):
            return inner
        return data

    @abstractmethod
    def _set_from_api_data(self, fields: Mapping[str, Any]) -> None:
        """Replace local state with the given wire fields."""

    @abstractmethod
    def _to_fields(self) -> dict[str, Any]:
        """Client-writable wire fields, without ``id``."""

    def to_payload(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self._id is not None:
            fields["id"] = self._id
        fields.update(self._to_fields())
        return {self.resource_key: fields}

    @property
    def api(self) -> ResflyApi:
        return self._api

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def path(self) -> str:
        return f"{self.collection_path}/{self._id}"

    def _set_id(self, fields: Mapping[str, Any]) -> None:
        new_id = fields.get("id")
        if new_id is not None:
            self._id = new_id

    def _require_id(self, operation: str) -> bool:
        if self._id is None:
            log.warning("Cannot %s unsaved %s", operation, self.resource_key)
            return False
        return True

    def save(self) -> bool:
        """Create or update the resource; fields are refreshed on success."""
        if self._id is None:
            if not self.can_create:
                log.warning("%s records cannot be created through the API", self.resource_key)
                return False
            response = self._api.make_request(self.collection_path, "POST", self.to_payload())
            expected = 201
        else:
            response = self._api.make_request(self.path, "PUT", self.to_payload())
            expected = 200

        if response.status_code != expected:
            log.info(
                "Saving %s failed: expected %d, got %d",
                self.resource_key, expected, response.status_code,
            )
            return False

        if not response.data or not isinstance(response.data.get(self.resource_key), Mapping):
            log.warning("Saving %s returned %d without a %r payload",
                        self.resource_key, expected, self.resource_key)
            return False

        self._set_from_api_data(response.data[self.resource_key])
        return True

    def delete(self) -> bool:
        if not self._require_id("delete"):
            return False
        response = self._api.make_request(self.path, "DELETE")
        return response.status_code == 204

    def _put_action(self, action: str) -> bool:
        if not self._require_id(action):
            return False
        response = self._api.make_request(f"{self.path}/{action}", "PUT")
        if response.status_code != 200:
            log.info("%s %s failed with status %d", action, self.resource_key, response.status_code)
            return False
        return True

    def _fetch_related(self, cls: type[R], list_key: str) -> list[R]:
        if not self._require_id(f"list {list_key} of"):
            return []
        response = self._api.make_request(f"{self.path}/{list_key}", "GET")
        if response.status_code != 200:
            return []
        return build_resources(self._api, cls, response.data, list_key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"
