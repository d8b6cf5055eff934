"""Exception types raised by the SDK.

Unexpected HTTP status codes are not exceptions: lifecycle operations
report them as ``False`` / ``None`` / ``[]``. Errors reported by the API in
a response body are collected on :class:`resfly.api.ResflyApi`.
"""
from __future__ import annotations


class ResflyError(Exception):
    """Base class for SDK errors."""


class TransportError(ResflyError):
    """The HTTP exchange failed before any status code was received."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class ConfigError(ResflyError):
    """Client configuration is missing or invalid."""
