"""Services for status-api."""

from .status_reporter import StatusReporter

__all__ = ["StatusReporter"]
