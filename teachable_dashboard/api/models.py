"""
Shapes of the Teachable API payloads consumed by the dashboard.

The client returns response bodies unmodified, so these are typing aids only;
nothing is validated or coerced against them.
"""

from __future__ import annotations

from typing import List, TypedDict


class Student(TypedDict):
    id: int
    name: str
    email: str


class _CourseBase(TypedDict):
    id: str
    name: str
    image_url: str
    heading: str
    is_published: bool


class Course(_CourseBase, total=False):
    description: str


class Enrollment(TypedDict):
    user_id: int
    percent_complete: int


class StudentsResponse(TypedDict):
    users: List[Student]


class CoursesResponse(TypedDict):
    courses: List[Course]


class EnrollmentsResponse(TypedDict):
    enrollments: List[Enrollment]
