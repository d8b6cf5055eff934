"""Immutable result of one HTTP exchange with the API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def error_messages(data: dict[str, Any] | None) -> list[str]:
    """Extract messages from a top-level ``errors`` list, if any."""
    if not data:
        return []
    entries = data.get("errors")
    if not entries or not isinstance(entries, list):
        return []

    messages: list[str] = []
    for entry in entries:
        if isinstance(entry, dict):
            message = entry.get("error") or entry.get("message")
            messages.append(str(message) if message is not None else str(entry))
        else:
            messages.append(str(entry))
    return messages


@dataclass(frozen=True)
class Response:
    status_code: int
    body: str
    data: dict[str, Any] | None = None

    @property
    def errors(self) -> list[str]:
        """Errors reported by the API in this response only."""
        return error_messages(self.data)
