"""
File: routers/info.py
Purpose: API index listing the routes this service exposes.
"""

from fastapi import APIRouter, Depends
from ..deps import get_reporter
from ..schemas.status import ApiInfo
from ..services.status_reporter import StatusReporter

router = APIRouter()

@router.get("/api", response_model=ApiInfo)
def api_info(reporter: StatusReporter = Depends(get_reporter)) -> ApiInfo:
    return reporter.get_api_info()
