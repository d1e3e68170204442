"""
Dialog listing the students enrolled in the selected course.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import streamlit as st

from teachable_dashboard.data.roster import (
    RosterSummary,
    join_roster,
    progress_distribution,
    summarize_roster,
)
from teachable_dashboard.state import DashboardState
from teachable_dashboard.ui.components.charts import bar_chart, render_plotly
from teachable_dashboard.ui.components.formatting import decode_html
from teachable_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from teachable_dashboard.ui.components.tables import display_roster, render_roster_table

LOADING_STUDENTS = "Loading students..."
NO_STUDENTS = "No students enrolled in this course."

STATUS_CLOSED = "closed"
STATUS_LOADING = "loading"
STATUS_ERROR = "error"
STATUS_EMPTY = "empty"
STATUS_TABLE = "table"


@dataclass
class EnrollmentModalView:
    status: str = STATUS_CLOSED
    title: str = ""
    message: Optional[str] = None
    roster: pd.DataFrame = field(default_factory=pd.DataFrame)
    summary: Optional[RosterSummary] = None
    distribution: Optional[pd.DataFrame] = None

    @property
    def is_open(self) -> bool:
        return self.status != STATUS_CLOSED

    @property
    def rows(self) -> List[dict]:
        """Visible rows as Name / Email / Progress records."""
        if self.roster.empty:
            return []
        return display_roster(self.roster).to_dict("records")


def build_enrollment_modal(state: DashboardState) -> EnrollmentModalView:
    """
    Decide what the dialog shows for the current selection.

    Joining and filtering run on every call, so flipping the "Completed"
    toggle only re-evaluates the rows; nothing is refetched.
    """
    course = state.selected_course
    if course is None:
        return EnrollmentModalView()

    title = f"Students in {decode_html(course.get('name'))}"
    result = state.enrollment_result
    if result.is_loading:
        return EnrollmentModalView(status=STATUS_LOADING, title=title, message=LOADING_STUDENTS)
    if result.error is not None:
        return EnrollmentModalView(status=STATUS_ERROR, title=title, message=str(result.error))

    enrollments = state.enrollment_list
    if enrollments is None:
        # selection made but the fetch has not started yet
        return EnrollmentModalView(status=STATUS_LOADING, title=title, message=LOADING_STUDENTS)
    if not enrollments:
        return EnrollmentModalView(status=STATUS_EMPTY, title=title, message=NO_STUDENTS)

    joined = join_roster(enrollments, state.student_list)
    return EnrollmentModalView(
        status=STATUS_TABLE,
        title=title,
        roster=state.roster(),
        summary=summarize_roster(joined),
        distribution=progress_distribution(joined) if not joined.empty else None,
    )


def _summary_cards(summary: RosterSummary) -> List[KpiCard]:
    return [
        KpiCard(label="Enrolled", value=summary.enrolled),
        KpiCard(label="Completed", value=summary.completed),
        KpiCard(label="Avg. Progress", value=summary.average_progress, is_percent=True),
    ]


def _render_body(view: EnrollmentModalView, state: DashboardState) -> None:
    if view.status in (STATUS_LOADING, STATUS_EMPTY):
        st.write(view.message)
        return
    if view.status == STATUS_ERROR:
        st.error(f"**Error:** {view.message}")
        return

    if view.summary is not None:
        render_kpi_cards(_summary_cards(view.summary), columns=3)

    st.toggle(
        "Completed",
        value=state.show_completed,
        key="td_show_completed",
        on_change=lambda: state.set_show_completed(st.session_state["td_show_completed"]),
    )
    render_roster_table(view.roster, export_file_name=f"course_{state.selected_course['id']}_students.csv")

    if view.distribution is not None:
        chart = bar_chart(
            view.distribution,
            x="Progress",
            y="Students",
            yaxis_title="Students",
            height=260,
            text_auto=True,
        )
        render_plotly(chart)


def _dialog_body(state: DashboardState) -> None:
    placeholder = st.empty()
    if not state.enrollment_result.is_settled:
        with placeholder.container():
            st.write(LOADING_STUDENTS)
        state.enrollments.ensure()

    view = build_enrollment_modal(state)
    with placeholder.container():
        _render_body(view, state)

    if st.button("Close", key="td_close_modal"):
        state.select_course(None)
        st.rerun()


def render_enrollment_modal(state: DashboardState) -> None:
    """Open the dialog for the selected course; renders nothing without one.

    Dismissing the dialog (X, Esc or a click outside) clears the selection
    the same way the "Close" button does.
    """
    if not state.modal_open:
        return
    view = build_enrollment_modal(state)
    dialog = st.dialog(view.title, width="large", on_dismiss=lambda: state.select_course(None))
    dialog(_dialog_body)(state)
