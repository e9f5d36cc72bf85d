"""Router registry for status-api (health, index, status, metrics)."""

from .health import router as health_router
from .info import router as info_router
from .metrics import router as metrics_router
from .status import router as status_router

__all__ = ["health_router", "info_router", "metrics_router", "status_router"]
