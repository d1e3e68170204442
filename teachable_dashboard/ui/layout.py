"""
Layout helpers for the Streamlit application (page config, sidebar).
"""

from __future__ import annotations

import streamlit as st

from teachable_dashboard.config import PAGE_TITLE, Settings


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="centered",
        page_icon=":mortar_board:",
    )


def sidebar(settings: Settings) -> bool:
    """Render the sidebar; returns True when the user asked for fresh data."""
    st.sidebar.header("Teachable")
    st.sidebar.caption(f"API: {settings.base_url}")
    return st.sidebar.button("🔄 Refresh Data", key="td_refresh")
