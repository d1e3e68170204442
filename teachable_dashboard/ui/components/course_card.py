"""
Course cards and the course grid.

`build_course_list` / `build_course_card` decide what is shown; the
`render_*` functions only turn that into Streamlit elements.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import streamlit as st

from teachable_dashboard.api.models import Course, CoursesResponse
from teachable_dashboard.config import COURSE_GRID_COLUMNS
from teachable_dashboard.data.queries import QueryResult
from teachable_dashboard.ui.components.formatting import decode_html

LOADING_COURSES = "Loading courses..."
NO_COURSES = "No courses found"
VIEW_STUDENTS = "View Students"


@dataclass
class CourseCardView:
    course: Course
    title: str
    image_url: Optional[str]
    subtitle: Optional[str]


@dataclass
class CourseListView:
    is_loading: bool = False
    error_message: Optional[str] = None
    cards: List[CourseCardView] = field(default_factory=list)
    is_empty: bool = False


def build_course_card(course: Course) -> CourseCardView:
    image_url = course.get("image_url") or None
    heading = decode_html(course.get("heading"))
    return CourseCardView(
        course=course,
        title=decode_html(course.get("name")),
        image_url=image_url,
        subtitle=heading or None,
    )


def build_course_list(result: QueryResult[CoursesResponse]) -> CourseListView:
    """
    Map the courses query onto what the page shows.

    An empty `courses` list is reported as `is_empty`, which is distinct from a
    query that is still loading or has not produced data.
    """
    view = CourseListView(
        is_loading=result.is_loading,
        error_message=str(result.error) if result.error is not None else None,
    )
    if result.data is None:
        return view
    courses = list(result.data.get("courses") or [])
    view.cards = [build_course_card(course) for course in courses]
    view.is_empty = not courses
    return view


def render_course_card(card: CourseCardView, on_view_students: Callable[[Course], None]) -> None:
    with st.container(border=True):
        st.subheader(card.title)
        if card.image_url:
            st.image(card.image_url)
        if card.subtitle:
            st.caption(card.subtitle)
        st.button(
            VIEW_STUDENTS,
            key=f"td_view_students_{card.course.get('id')}",
            on_click=on_view_students,
            args=(card.course,),
        )


def render_course_list(view: CourseListView, on_view_students: Callable[[Course], None]) -> None:
    if view.is_loading:
        st.write(LOADING_COURSES)
    if view.error_message:
        st.error(f"**Error:** {view.error_message}")

    if view.cards:
        for idx in range(0, len(view.cards), COURSE_GRID_COLUMNS):
            row_cards = view.cards[idx: idx + COURSE_GRID_COLUMNS]
            cols = st.columns(COURSE_GRID_COLUMNS)
            for col, card in zip(cols, row_cards):
                with col:
                    render_course_card(card, on_view_students)
    elif view.is_empty:
        st.write(NO_COURSES)
