"""
File: services/status_reporter.py
Purpose: Build the static status, auth-capability, health and index payloads.

The reporter holds no state beyond its settings, its clocks and the moment it
was created. Every payload is built fresh per call.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ..config import Settings
from ..schemas.status import (
    ApiInfo,
    AuthCapability,
    AuthEndpoints,
    AuthMode,
    CapabilityReport,
    HealthReport,
    StatusReport,
)

STATUS_MESSAGE = "Server is working!"
CAPABILITY_MESSAGE = "Auth endpoints available"

@dataclass(frozen=True)
class AuthModeEntry:
    """One auth subsystem, tagged by mode; label is the key in the capability report."""
    mode: AuthMode
    label: str
    signup: str
    login: str
    status: str
    test: Optional[str] = None

    def to_capability(self) -> AuthCapability:
        return AuthCapability(signup=self.signup, login=self.login, test=self.test, status=self.status)


# Ordered: the capability report lists modes in this order
AUTH_CAPABILITIES: List[AuthModeEntry] = [
    AuthModeEntry(
        mode=AuthMode.SIMPLE,
        label="Simple Auth (Recommended)",
        signup="/api/auth/simple/signup",
        login="/api/auth/simple/login",
        test="/api/auth/simple/test",
        status="Working ✅",
    ),
    AuthModeEntry(
        mode=AuthMode.REGULAR,
        label="Regular Auth",
        signup="/api/auth/signup",
        login="/api/auth/login",
        status="May have DB issues ⚠️",
    ),
    AuthModeEntry(
        mode=AuthMode.SUPABASE,
        label="Supabase Auth",
        signup="/api/auth/supabase/signup",
        login="/api/auth/supabase/login",
        status="Under development 🔧",
    ),
]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(dt: datetime) -> str:
    """Format as 2026-01-02T03:04:05.678Z so string order matches time order."""
    utc = dt.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class StatusReporter:
    """Answer status queries from an explicitly passed Settings object."""

    def __init__(
        self,
        settings: Settings,
        clock: Optional[Callable[[], datetime]] = None,
        monotonic: Optional[Callable[[], float]] = None,
    ) -> None:
        self._settings = settings
        self._clock = clock or _utc_now
        self._monotonic = monotonic or time.monotonic
        self._started = self._monotonic()

    @property
    def environment(self) -> str:
        return self._settings.environment_label

    def _signup_paths(self) -> AuthEndpoints:
        by_mode: Dict[AuthMode, str] = {c.mode: c.signup for c in AUTH_CAPABILITIES}
        return AuthEndpoints(
            simple=by_mode[AuthMode.SIMPLE],
            regular=by_mode[AuthMode.REGULAR],
            supabase=by_mode[AuthMode.SUPABASE],
        )

    def get_status(self) -> StatusReport:
        """Return liveness, timestamp, environment and the signup path per auth mode."""
        return StatusReport(
            success=True,
            message=STATUS_MESSAGE,
            timestamp=iso_timestamp(self._clock()),
            environment=self.environment,
            auth_endpoints=self._signup_paths(),
        )

    def get_auth_capabilities(self) -> CapabilityReport:
        """Return the three auth subsystems keyed by display label."""
        return CapabilityReport(
            success=True,
            message=CAPABILITY_MESSAGE,
            endpoints={c.label: c.to_capability() for c in AUTH_CAPABILITIES},
        )

    def get_health(self) -> HealthReport:
        uptime = max(0.0, self._monotonic() - self._started)
        return HealthReport(
            status="OK",
            timestamp=iso_timestamp(self._clock()),
            uptime=round(uptime, 3),
            environment=self.environment,
        )

    def get_api_info(self) -> ApiInfo:
        """Index of the routes this app serves."""
        prefix = self._settings.status_prefix
        return ApiInfo(
            name=self._settings.SERVICE_NAME,
            version=self._settings.API_VERSION,
            description="Service self-check and auth capability reporting",
            endpoints={
                "status": prefix,
                "auth": f"{prefix}/auth",
                "health": "/api/health",
                "metrics": "/metrics",
            },
        )
