"""
Cached loaders for the three Teachable fetches.

The public functions resolve connection parameters from `Settings` and call
the cached implementations with explicit params for proper cache keying, so
reruns and reopening a course already viewed do not hit the API again.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from teachable_dashboard.api.models import (
    CoursesResponse,
    EnrollmentsResponse,
    StudentsResponse,
)
from teachable_dashboard.api.teachable import TeachableClient
from teachable_dashboard.config import CACHE_TTL_SECONDS, Settings


def load_courses(settings: Settings) -> CoursesResponse:
    return _load_courses_impl(settings.api_key, settings.base_url, settings.timeout)


def load_students(settings: Settings) -> StudentsResponse:
    return _load_students_impl(settings.api_key, settings.base_url, settings.timeout)


def load_enrollments(settings: Settings, course_id: str) -> EnrollmentsResponse:
    return _load_enrollments_impl(settings.api_key, settings.base_url, settings.timeout, course_id)


def clear_caches() -> None:
    """Drop every cached response; the next run refetches from the API."""
    _load_courses_impl.clear()  # type: ignore[attr-defined]
    _load_students_impl.clear()  # type: ignore[attr-defined]
    _load_enrollments_impl.clear()  # type: ignore[attr-defined]


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_courses_impl(api_key: str, base_url: str, timeout: Optional[float]) -> CoursesResponse:
    with TeachableClient(api_key, base_url=base_url, timeout=timeout) as client:
        return client.fetch_courses()


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_students_impl(api_key: str, base_url: str, timeout: Optional[float]) -> StudentsResponse:
    with TeachableClient(api_key, base_url=base_url, timeout=timeout) as client:
        return client.fetch_students()


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_enrollments_impl(
    api_key: str,
    base_url: str,
    timeout: Optional[float],
    course_id: str,
) -> EnrollmentsResponse:
    with TeachableClient(api_key, base_url=base_url, timeout=timeout) as client:
        return client.fetch_students_in_course(course_id)
