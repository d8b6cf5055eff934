#!/usr/bin/env python3
"""Run the end-to-end API walkthrough against the configured account."""
from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from resfly.log import configure_logging, get_logger
from resfly.errors import ConfigError, TransportError

log = get_logger("resfly.run_example")


if __name__ == "__main__":
    configure_logging(os.environ.get("RESFLY_LOG_LEVEL") or "INFO", os.environ.get("RESFLY_LOG_DIR") or None)

    from resfly.api import ResflyApi
    from resfly.walkthrough import run

    try:
        api = ResflyApi.from_env(sys.argv[1] if len(sys.argv) > 1 else None)
    except ConfigError as exc:
        print()
        print(f"  {exc}")
        print("  Set RESFLY_API_KEY in .env or pass a YAML config path.")
        print()
        sys.exit(1)

    try:
        result = run(api)
    except TransportError as exc:
        log.error("Could not reach %s: %s", api.url, exc.reason)
        sys.exit(2)

    log.info("Walkthrough complete.")
    log.info("  Company: %s", result["company_id"])
    log.info("  Job: %s (%s)", result["job_id"], result["job_status"])
    log.info("  Candidates: %d", len(result["candidates"]))
    log.info("  Errors: %d", len(result["errors"]))
