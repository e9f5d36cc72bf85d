"""
File: config.py
Purpose: Centralized configuration using environment variables (12-factor).
"""

from pydantic_settings import BaseSettings

DEFAULT_ENV = "development"

class Settings(BaseSettings):
    """Load service configuration from environment variables."""
    ENV: str = DEFAULT_ENV
    SERVICE_NAME: str = "status-api"
    LOG_LEVEL: str = "INFO"
    API_VERSION: str = "1.0.0"

    # Status routes are served under /api/<STATUS_ROOT>
    STATUS_ROOT: str = "test"

    # uvicorn bind address
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    @property
    def environment_label(self) -> str:
        """Return ENV, falling back to the development label when blank."""
        return self.ENV.strip() or DEFAULT_ENV

    @property
    def status_prefix(self) -> str:
        """Return the URL prefix of the status routes, e.g. /api/test."""
        return "/api/" + self.STATUS_ROOT.strip("/")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
