"""Logging setup for the SDK.

Only the ``resfly`` package logger is touched; the host application's root
logger is left alone. Handlers are attached when ``RESFLY_LOG_LEVEL`` or
``RESFLY_LOG_DIR`` is set, or when a script calls :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

PACKAGE_LOGGER = "resfly"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False
_installed: list[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures the package logger on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def _configure() -> None:
    package = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package.handlers):
        package.addHandler(logging.NullHandler())

    level_name = os.environ.get("RESFLY_LOG_LEVEL", "").strip()
    log_dir = os.environ.get("RESFLY_LOG_DIR", "").strip()
    if level_name or log_dir:
        configure_logging(level_name or "INFO", log_dir or None)


def configure_logging(level: str | int = "INFO", log_dir: str | Path | None = None) -> logging.Logger:
    """Send ``resfly.*`` records to stdout and, optionally, a daily log file.

    Calling it again replaces the handlers it installed before.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    package = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed:
        package.removeHandler(handler)
        handler.close()
    _installed.clear()

    package.setLevel(level)
    package.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    _installed.append(console)

    failure: OSError | None = None
    if log_dir:
        try:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            log_file = path / f"resfly_{datetime.now().strftime('%Y-%m-%d')}.log"
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
            _installed.append(fh)
        except OSError as exc:
            failure = exc

    for handler in _installed:
        package.addHandler(handler)
    if failure is not None:
        package.warning("Could not open log directory %s: %s", log_dir, failure)
    return package
