"""
View state for the dashboard page.

`DashboardState` owns the course selection, the "completed only" toggle and
one query per fetch. It knows nothing about Streamlit widgets: the UI layer
keeps one instance per session in `st.session_state` and calls into it.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import pandas as pd

from teachable_dashboard.api.models import (
    Course,
    CoursesResponse,
    Enrollment,
    EnrollmentsResponse,
    Student,
    StudentsResponse,
)
from teachable_dashboard.data.queries import KeyedQuery, QueryResult
from teachable_dashboard.data.roster import filter_completed, join_roster

logger = logging.getLogger(__name__)

COURSES_KEY = "courses"
STUDENTS_KEY = "students"


class DashboardState:
    def __init__(
        self,
        fetch_courses: Callable[[], CoursesResponse],
        fetch_students: Callable[[], StudentsResponse],
        fetch_enrollments: Callable[[str], EnrollmentsResponse],
    ) -> None:
        self.selected_course: Optional[Course] = None
        self.show_completed = False
        # courses and students are always enabled; enrollments only with a selection
        self.courses: KeyedQuery[CoursesResponse] = KeyedQuery(
            "courses", lambda _key: fetch_courses(), key=COURSES_KEY
        )
        self.students: KeyedQuery[StudentsResponse] = KeyedQuery(
            "students", lambda _key: fetch_students(), key=STUDENTS_KEY
        )
        self.enrollments: KeyedQuery[EnrollmentsResponse] = KeyedQuery(
            "enrollments", lambda course_id: fetch_enrollments(str(course_id))
        )

    @property
    def modal_open(self) -> bool:
        return self.selected_course is not None

    def select_course(self, course: Optional[Course]) -> None:
        self.selected_course = course
        self.enrollments.set_key(course["id"] if course is not None else None)
        logger.info("selected course: %s", course["id"] if course is not None else None)

    def set_show_completed(self, show_completed: bool) -> None:
        self.show_completed = bool(show_completed)

    def load(self) -> None:
        """Run the page's fetches that have not settled yet. Each one settles on its own."""
        self.courses.ensure()
        self.students.ensure()
        self.enrollments.ensure()

    def invalidate(self) -> None:
        self.courses.invalidate()
        self.students.invalidate()
        self.enrollments.invalidate()

    @property
    def student_list(self) -> List[Student]:
        data = self.students.result.data
        return list(data.get("users") or []) if data else []

    @property
    def enrollment_list(self) -> Optional[List[Enrollment]]:
        data = self.enrollments.result.data
        return None if data is None else list(data.get("enrollments") or [])

    @property
    def enrollment_result(self) -> QueryResult[EnrollmentsResponse]:
        return self.enrollments.result

    def roster(self) -> pd.DataFrame:
        """Joined and filtered rows for the selected course."""
        enrollments = self.enrollment_list or []
        return filter_completed(join_roster(enrollments, self.student_list), self.show_completed)
