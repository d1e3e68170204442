"""
Per-session dashboard state.
"""

from __future__ import annotations

from functools import partial

import streamlit as st

from teachable_dashboard.config import Settings
from teachable_dashboard.data.loader import load_courses, load_enrollments, load_students
from teachable_dashboard.state import DashboardState

STATE_KEY = "td_dashboard_state"


def get_dashboard_state(settings: Settings) -> DashboardState:
    """Return this session's `DashboardState`, creating it on first use."""
    state = st.session_state.get(STATE_KEY)
    if state is None:
        state = DashboardState(
            fetch_courses=partial(load_courses, settings),
            fetch_students=partial(load_students, settings),
            fetch_enrollments=partial(load_enrollments, settings),
        )
        st.session_state[STATE_KEY] = state
    return state
