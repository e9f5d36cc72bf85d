"""
File: probes.py
Purpose: Probe descriptors and per-probe / per-run result records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ProbeKind(str, Enum):
    """How a probe's response body is read and summarized."""
    TEXT = "text"
    JSON = "json"
    COLLECTION = "collection"


@dataclass(frozen=True)
class Probe:
    """One GET request against the target service."""
    name: str
    path: str
    kind: ProbeKind = ProbeKind.JSON
    collection_key: Optional[str] = None  # COLLECTION only: key of the list in the body


@dataclass
class ProbeResult:
    """Outcome of one probe: ok with a summary, or failed with an error description."""
    probe: Probe
    ok: bool
    status_code: Optional[int] = None
    summary: str = ""
    error: Optional[str] = None
    elapsed_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.probe.name,
            "path": self.probe.path,
            "ok": self.ok,
            "status_code": self.status_code,
            "summary": self.summary,
            "error": self.error,
            "elapsed_ms": round(self.elapsed_ms, 1),
        }


@dataclass
class SmokeReport:
    """Ordered results of a smoke run."""
    base_url: str
    results: List[ProbeResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "passed": self.passed,
            "failed": self.failed,
            "results": [r.to_dict() for r in self.results],
        }


# Paths belong to the service under test
DEFAULT_PROBES: List[Probe] = [
    Probe(name="Health endpoint", path="/health", kind=ProbeKind.TEXT),
    Probe(name="API Health endpoint", path="/api/health", kind=ProbeKind.JSON),
    Probe(name="Posts endpoint", path="/api/posts", kind=ProbeKind.COLLECTION, collection_key="posts"),
]
