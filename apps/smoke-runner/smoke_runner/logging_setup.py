"""
File: logging_setup.py
Purpose: Configure structured JSON logging for the smoke runner CLI.
"""

import logging
import sys
from typing import Optional
from pythonjsonlogger import jsonlogger
from .config import settings

def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logger for JSON output on stderr so stdout stays the report."""
    logger = logging.getLogger()
    logger.setLevel(level or settings.LOG_LEVEL)
    handler = logging.StreamHandler(sys.stderr)
    formatter = jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.handlers = [handler]
