"""Load client settings from the environment and an optional YAML file."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from resfly.errors import ConfigError
from resfly.log import get_logger

log = get_logger(__name__)

load_dotenv()

DEFAULT_API_URL = "https://api.resfly.com"
DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientSettings:
    api_url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def _parse_timeout(raw: Any) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def load_settings(path: str | Path | None = None) -> ClientSettings:
    """Resolve settings: YAML file first, then RESFLY_* env vars on top.

    The file is taken from ``path`` or ``RESFLY_CONFIG``; both are optional.
    """
    file_values: dict[str, Any] = {}
    config_path = path or get_env("RESFLY_CONFIG")
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        file_values = _read_yaml(config_path)
        log.debug("Loaded settings from %s", config_path)

    api_url = get_env("RESFLY_API_URL") or str(file_values.get("api_url") or DEFAULT_API_URL)
    api_key = get_env("RESFLY_API_KEY") or str(file_values.get("api_key") or "")
    raw_timeout = get_env("RESFLY_TIMEOUT") or file_values.get("timeout", DEFAULT_TIMEOUT)

    if not api_key:
        raise ConfigError("No API key configured (set RESFLY_API_KEY or api_key in the config file)")

    return ClientSettings(
        api_url=api_url.rstrip("/"),
        api_key=api_key,
        timeout=_parse_timeout(raw_timeout),
    )
