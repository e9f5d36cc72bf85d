"""
File: config.py
Purpose: Centralized configuration using environment variables (12-factor).
"""

from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Load smoke runner configuration from environment variables."""
    SERVICE_NAME: str = "smoke-runner"
    LOG_LEVEL: str = "INFO"

    # Target service
    SMOKE_BASE_URL: str = "http://localhost:5000"
    SMOKE_STARTUP_DELAY_SECS: float = 3.0  # let the target finish starting
    SMOKE_HTTP_TIMEOUT_SECS: float = 5.0   # per request (connect/read/write/pool)

    # Deployment readiness checklist
    READINESS_REQUIRED_ENV: str = "DATABASE_URL,JWT_SECRET"

    @property
    def required_env(self) -> List[str]:
        """Return READINESS_REQUIRED_ENV as a list of variable names."""
        return [v.strip() for v in self.READINESS_REQUIRED_ENV.split(",") if v.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
