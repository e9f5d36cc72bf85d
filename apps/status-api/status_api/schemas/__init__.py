"""Response schemas for status-api."""

from .status import (
    ApiInfo,
    AuthCapability,
    AuthEndpoints,
    AuthMode,
    CapabilityReport,
    HealthReport,
    StatusReport,
)

__all__ = [
    "ApiInfo",
    "AuthCapability",
    "AuthEndpoints",
    "AuthMode",
    "CapabilityReport",
    "HealthReport",
    "StatusReport",
]
