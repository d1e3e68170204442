"""
Roster table rendering with a CSV export of the visible rows.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from teachable_dashboard.ui.components.formatting import format_percent

DISPLAY_COLUMNS = {
    "name": "Name",
    "email": "Email",
    "percent_complete": "Progress",
}


def display_roster(roster: pd.DataFrame) -> pd.DataFrame:
    """Name / Email / Progress columns, progress rendered as e.g. `75%`."""
    display = roster[list(DISPLAY_COLUMNS)].copy() if not roster.empty else pd.DataFrame(columns=list(DISPLAY_COLUMNS))
    display["percent_complete"] = display["percent_complete"].apply(format_percent)
    return display.rename(columns=DISPLAY_COLUMNS).reset_index(drop=True)


def render_roster_table(roster: pd.DataFrame, export_file_name: str = "students.csv", height: int = 320) -> None:
    st.dataframe(
        display_roster(roster),
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    csv_bytes = roster.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
        disabled=roster.empty,
    )
