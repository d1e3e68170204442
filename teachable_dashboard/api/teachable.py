"""
Thin client for the Teachable public REST API.

Each fetch maps a non-success status to a `TeachableAPIError` with a fixed
per-endpoint message. Transport failures (connection errors, undecodable
bodies) are not caught here and reach the caller as raised by `requests`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from teachable_dashboard.api.models import (
    CoursesResponse,
    EnrollmentsResponse,
    StudentsResponse,
)
from teachable_dashboard.config import DEFAULT_BASE_URL
from teachable_dashboard.errors import ConfigurationError, TeachableAPIError

logger = logging.getLogger(__name__)

STUDENTS_ERROR = "Failed to fetch students"
COURSES_ERROR = "Failed to fetch courses"
ENROLLMENTS_ERROR = "Failed to fetch course enrollments"


class TeachableClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Teachable API key is not configured")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # only a session created here is closed by close()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {
            "accept": "application/json",
            "apikey": api_key,
        }

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "TeachableClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str, error_message: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        if not 200 <= response.status_code < 300:
            logger.warning("GET %s -> %s", path, response.status_code)
            raise TeachableAPIError(error_message, endpoint=path, status_code=response.status_code)
        return response.json()

    def fetch_students(self) -> StudentsResponse:
        return self._get("/users", STUDENTS_ERROR)

    def fetch_courses(self) -> CoursesResponse:
        return self._get("/courses", COURSES_ERROR)

    def fetch_students_in_course(self, course_id: str) -> EnrollmentsResponse:
        # course_id goes into the path as-is
        return self._get(f"/courses/{course_id}/enrollments", ENROLLMENTS_ERROR)
