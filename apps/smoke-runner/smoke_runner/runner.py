"""
File: runner.py
Purpose: Sequential live smoke test of a running service's basic endpoints.

Each probe is awaited to completion before the next starts. A probe never
raises: network errors, invalid URLs, non-2xx statuses and unparseable bodies
all become a failed ProbeResult, and the run carries on with the next probe.
"""

import asyncio
import json
import logging
import time
from typing import Any, Awaitable, Callable, List, Optional, Sequence

import httpx

from .probes import DEFAULT_PROBES, Probe, ProbeKind, ProbeResult, SmokeReport

logger = logging.getLogger(__name__)

_MAX_SUMMARY_CHARS = 200


def _truncate(text: str, limit: int = _MAX_SUMMARY_CHARS) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."


def _describe(exc: Exception) -> str:
    msg = str(exc).strip()
    return f"{type(exc).__name__}: {msg}" if msg else type(exc).__name__


def summarize(probe: Probe, resp: httpx.Response) -> str:
    """Build a shape-appropriate summary; raises ValueError when the body does not parse."""
    if probe.kind is ProbeKind.TEXT:
        return f"{resp.status_code} {_truncate(resp.text)}"

    body = resp.json()
    if probe.kind is ProbeKind.JSON:
        return f"{resp.status_code} {_truncate(json.dumps(body, separators=(',', ':'), ensure_ascii=False))}"

    if not isinstance(body, dict):
        raise ValueError(f"expected a JSON object, got {type(body).__name__}")
    summary = f"{resp.status_code} {'Success' if body.get('success') else 'Failed'}"
    key = probe.collection_key
    if key and key in body:
        items = body[key]
        if not isinstance(items, list):
            raise ValueError(f"expected '{key}' to be a list, got {type(items).__name__}")
        summary += f"; found {len(items)} {key}"
    return summary


def format_result(result: ProbeResult) -> str:
    """Render one human-readable pass/fail line."""
    if result.ok:
        return f"[pass] {result.probe.name}: {result.summary}"
    return f"[fail] {result.probe.name} failed: {result.error}"


class SmokeTestRunner:
    """Probe a target service once, in a fixed order, and report pass/fail per probe."""

    def __init__(
        self,
        base_url: str,
        probes: Optional[Sequence[Probe]] = None,
        startup_delay: float = 3.0,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        echo: Callable[[str], Any] = print,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.probes: List[Probe] = list(DEFAULT_PROBES if probes is None else probes)
        self.startup_delay = startup_delay
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._echo = echo
        self._sleep = sleep

    async def check(self, client: httpx.AsyncClient, probe: Probe) -> ProbeResult:
        """Issue one GET and convert any failure into a failed result."""
        start = time.perf_counter()
        status_code: Optional[int] = None
        try:
            resp = await client.get(probe.path)
            status_code = resp.status_code
            resp.raise_for_status()
            summary = summarize(probe, resp)
        except httpx.HTTPStatusError as e:
            error = f"HTTP {e.response.status_code} {e.response.reason_phrase}".strip()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error = _describe(e)
        except ValueError as e:
            error = f"unparseable body: {_describe(e)}"
        else:
            elapsed = (time.perf_counter() - start) * 1000
            logger.info("probe passed", extra={"probe": probe.name, "path": probe.path, "status": status_code})
            return ProbeResult(probe=probe, ok=True, status_code=status_code, summary=summary, elapsed_ms=elapsed)

        elapsed = (time.perf_counter() - start) * 1000
        logger.warning("probe failed", extra={"probe": probe.name, "path": probe.path, "error": error})
        return ProbeResult(probe=probe, ok=False, status_code=status_code, error=error, elapsed_ms=elapsed)

    async def run(self) -> SmokeReport:
        """Wait for the target to start, then run every probe in order."""
        if self.startup_delay > 0:
            await self._sleep(self.startup_delay)

        self._echo(f"[start] Testing server endpoints at {self.base_url} ...")
        report = SmokeReport(base_url=self.base_url)
        try:
            client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)
        except httpx.InvalidURL as e:
            # No request can be built; every check fails with the same reason
            error = _describe(e)
            logger.warning("invalid base url", extra={"base_url": self.base_url, "error": error})
            for probe in self.probes:
                result = ProbeResult(probe=probe, ok=False, error=error)
                report.results.append(result)
                self._echo(format_result(result))
        else:
            async with client:
                for probe in self.probes:
                    result = await self.check(client, probe)
                    report.results.append(result)
                    self._echo(format_result(result))

        self._echo(
            f"[done] Smoke test completed: probes={len(report.results)} "
            f"passed={report.passed} failed={report.failed}"
        )
        return report
