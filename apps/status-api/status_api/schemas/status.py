"""
File: schemas/status.py
Purpose: Pydantic response models for the status, auth-capability and health routes.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field

class AuthMode(str, Enum):
    """Authentication subsystems the server knows about."""
    SIMPLE = "simple"
    REGULAR = "regular"
    SUPABASE = "supabase"

class AuthEndpoints(BaseModel):
    """Signup path per auth mode, as advertised by the status route."""
    simple: str
    regular: str
    supabase: str

class StatusReport(BaseModel):
    """Server liveness plus the known auth endpoint paths."""
    success: bool = True
    message: str
    timestamp: str = Field(..., description="UTC ISO 8601 with millisecond precision")
    environment: str
    auth_endpoints: AuthEndpoints = Field(..., alias="authEndpoints")

    class Config:
        populate_by_name = True

class AuthCapability(BaseModel):
    """Known paths and availability of one auth subsystem."""
    signup: str
    login: str
    test: Optional[str] = None
    status: str

class CapabilityReport(BaseModel):
    """Auth subsystems keyed by their display label."""
    success: bool = True
    message: str
    endpoints: Dict[str, AuthCapability]

class HealthReport(BaseModel):
    """Liveness probe body for deployment platforms."""
    status: str = "OK"
    timestamp: str
    uptime: float = Field(..., ge=0, description="Seconds since the reporter was created")
    environment: str

class ApiInfo(BaseModel):
    """Index of the routes served by this app."""
    name: str
    version: str
    description: str
    endpoints: Dict[str, str]
