from __future__ import annotations

import streamlit as st

from teachable_dashboard.state import DashboardState
from teachable_dashboard.ui.components.course_card import (
    LOADING_COURSES,
    build_course_list,
    render_course_list,
)
from teachable_dashboard.ui.components.enrollment_modal import render_enrollment_modal


def render(state: DashboardState) -> None:
    # courses and students settle independently; a failure in one leaves the other intact
    placeholder = st.empty()
    if not state.courses.result.is_settled:
        placeholder.write(LOADING_COURSES)
    state.courses.ensure()
    state.students.ensure()

    with placeholder.container():
        render_course_list(build_course_list(state.courses.result), on_view_students=state.select_course)

    if state.students.result.error is not None:
        st.warning(f"Student details unavailable: {state.students.result.error}")

    render_enrollment_modal(state)
