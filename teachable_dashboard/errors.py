"""
Exception types shared across the dashboard.
"""

from __future__ import annotations

from typing import Optional


class DashboardError(Exception):
    """Base class for errors raised by the dashboard."""


class ConfigurationError(DashboardError):
    """Required configuration is missing; the app cannot start."""


class TeachableAPIError(DashboardError):
    """The Teachable API answered with a non-success status.

    The message is fixed per endpoint; status code is kept for logging only.
    """

    def __init__(self, message: str, endpoint: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
