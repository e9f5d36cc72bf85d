"""Smoke runner: live pass/fail checks of a running service, plus a deployment readiness checklist."""

from .probes import DEFAULT_PROBES, Probe, ProbeKind, ProbeResult, SmokeReport
from .runner import SmokeTestRunner, format_result

__all__ = [
    "DEFAULT_PROBES",
    "Probe",
    "ProbeKind",
    "ProbeResult",
    "SmokeReport",
    "SmokeTestRunner",
    "format_result",
]
