"""
File: main.py
Purpose: Application entrypoint for the status API. Wires routers, logging, telemetry and the reporter.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from .config import Settings, settings as default_settings
from .logging_setup import configure_logging
from .instrumentation import setup_metrics, REQUESTS, LATENCY
from .routers import health_router, info_router, metrics_router, status_router
from .services.status_reporter import StatusReporter

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE = "unmatched"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app startup/shutdown lifecycle."""
    cfg: Settings = app.state.settings
    configure_logging(cfg.LOG_LEVEL)
    setup_metrics(app)
    logger.info("status api started", extra={"environment": cfg.environment_label, "status_prefix": cfg.status_prefix})
    yield
    logger.info("status api stopped")

def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI app around a StatusReporter for the given settings."""
    cfg = cfg or default_settings
    app = FastAPI(
        title="Status API",
        description="Server status and auth capability reporting",
        version=cfg.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.reporter = StatusReporter(cfg)

    # Simple request timing middleware for metrics
    @app.middleware("http")
    async def prometheus_middleware(request: Request, call_next):
        """Track request metrics and latency histograms."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        # Label by route template so unknown paths share one series
        matched = request.scope.get("route")
        route = getattr(matched, "path", None) or UNMATCHED_ROUTE
        LATENCY.labels(route=route).observe(elapsed)
        REQUESTS.labels(route=route, method=request.method, status=str(response.status_code)).inc()
        return response

    # Routers
    app.include_router(health_router, prefix="", tags=["system"])
    app.include_router(metrics_router, prefix="", tags=["system"])
    app.include_router(info_router, prefix="", tags=["system"])
    app.include_router(status_router, prefix=cfg.status_prefix, tags=["status"])
    return app

app = create_app()

def run_server(cfg: Optional[Settings] = None) -> None:
    """Serve the app with uvicorn on HOST:PORT from settings."""
    import uvicorn

    cfg = cfg or default_settings
    logger.info("Status server on %s:%s", cfg.HOST, cfg.PORT)
    uvicorn.run(create_app(cfg), host=cfg.HOST, port=int(cfg.PORT), log_level=cfg.LOG_LEVEL.lower())

if __name__ == "__main__":
    run_server()
