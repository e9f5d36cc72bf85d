"""
File: routers/health.py
Purpose: Liveness probes for deployment platforms and the smoke runner.
"""

from fastapi import APIRouter, Depends
from ..deps import get_reporter
from ..schemas.status import HealthReport
from ..services.status_reporter import StatusReporter

router = APIRouter()

@router.get("/health", response_model=HealthReport)
def health(reporter: StatusReporter = Depends(get_reporter)) -> HealthReport:
    """Return service health status for liveness probes."""
    return reporter.get_health()

@router.get("/api/health", response_model=HealthReport)
def api_health(reporter: StatusReporter = Depends(get_reporter)) -> HealthReport:
    """Same body as /health, under the API prefix."""
    return reporter.get_health()
