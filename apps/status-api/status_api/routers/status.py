"""
File: routers/status.py
Purpose: Server status and auth capability routes (mounted under /api/<STATUS_ROOT>).
"""

from fastapi import APIRouter, Depends
from ..deps import get_reporter
from ..schemas.status import CapabilityReport, StatusReport
from ..services.status_reporter import StatusReporter

router = APIRouter()

@router.get("", response_model=StatusReport)
def get_status(reporter: StatusReporter = Depends(get_reporter)) -> StatusReport:
    """Simple endpoint to verify a deployment is up and which auth routes exist."""
    return reporter.get_status()

@router.get("/auth", response_model=CapabilityReport, response_model_exclude_none=True)
def get_auth_capabilities(reporter: StatusReporter = Depends(get_reporter)) -> CapabilityReport:
    """Report auth subsystem availability."""
    return reporter.get_auth_capabilities()
