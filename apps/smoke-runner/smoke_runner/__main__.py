# smoke_runner/__main__.py
# Purpose: One-shot smoke test of a running service: GET /health, /api/health, /api/posts
#          and print a pass/fail line per request.
#
# Env Vars (used if CLI args not provided):
#   - SMOKE_BASE_URL           : target base URL (default http://localhost:5000)
#   - SMOKE_STARTUP_DELAY_SECS : seconds to wait before the first request (default 3)
#   - SMOKE_HTTP_TIMEOUT_SECS  : per-request timeout (default 5)
#
# Usage:
#   python -m smoke_runner
#   python -m smoke_runner --base-url http://staging:5000 --delay 0 --json
#
# Notes:
# - Always exits 0: this is a diagnostic aid, not a gating test.

import argparse
import asyncio
import json
import logging
from typing import List, Optional

from .config import settings
from .logging_setup import configure_logging
from .runner import SmokeTestRunner

log = logging.getLogger("smoke_runner")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    p = argparse.ArgumentParser(description="Smoke test a running service's basic endpoints.")
    p.add_argument("--base-url", default=settings.SMOKE_BASE_URL, help="Target base URL")
    p.add_argument("--delay", type=float, default=settings.SMOKE_STARTUP_DELAY_SECS,
                   help="Seconds to wait for the target to start")
    p.add_argument("--timeout", type=float, default=settings.SMOKE_HTTP_TIMEOUT_SECS,
                   help="Per-request timeout in seconds")
    p.add_argument("--json", action="store_true", help="Also print the report as JSON")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    log.info("smoke run starting", extra={"base_url": args.base_url, "delay": args.delay, "timeout": args.timeout})

    runner = SmokeTestRunner(args.base_url, startup_delay=args.delay, timeout=args.timeout)
    report = asyncio.run(runner.run())
    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
