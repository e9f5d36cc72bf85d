"""
File: deps.py
Purpose: Dependency helpers (status reporter lookup).
"""

from fastapi import Request
from .services.status_reporter import StatusReporter

def get_reporter(request: Request) -> StatusReporter:
    """Return the StatusReporter attached to app.state by create_app()."""
    return request.app.state.reporter
