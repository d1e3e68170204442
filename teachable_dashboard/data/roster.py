"""
Roster helpers: join a course's enrollments to the school's students and
apply the "completed only" filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from teachable_dashboard.api.models import Enrollment, Student
from teachable_dashboard.config import COMPLETED_PERCENT

ROSTER_COLUMNS = ["user_id", "name", "email", "percent_complete"]
PROGRESS_BINS = [0, 25, 50, 75, 99, 100]
PROGRESS_LABELS = ["0-25%", "26-50%", "51-75%", "76-99%", "100%"]


@dataclass
class RosterSummary:
    enrolled: int
    completed: int
    average_progress: Optional[float]


def _empty_roster() -> pd.DataFrame:
    return pd.DataFrame(columns=ROSTER_COLUMNS)


def join_roster(enrollments: Iterable[Enrollment], students: Iterable[Student]) -> pd.DataFrame:
    """
    Match every enrollment to its student by `user_id`.

    Enrollments whose student is not in `students` are dropped without error:
    departed or renamed students legitimately leave such gaps. Row order
    follows the enrollments. When ids repeat in `students`, the first wins.
    """
    enrollment_df = pd.DataFrame(list(enrollments), columns=["user_id", "percent_complete"])
    student_df = pd.DataFrame(list(students), columns=["id", "name", "email"])
    if enrollment_df.empty or student_df.empty:
        return _empty_roster()

    enrollment_df["user_id"] = pd.to_numeric(enrollment_df["user_id"], errors="coerce")
    enrollment_df["percent_complete"] = pd.to_numeric(enrollment_df["percent_complete"], errors="coerce")
    student_df["id"] = pd.to_numeric(student_df["id"], errors="coerce")
    student_df = student_df.dropna(subset=["id"]).drop_duplicates(subset="id", keep="first")

    joined = enrollment_df.dropna(subset=["user_id"]).merge(
        student_df,
        left_on="user_id",
        right_on="id",
        how="inner",
    )
    if joined.empty:
        return _empty_roster()
    joined["user_id"] = joined["user_id"].astype(int)
    return joined[ROSTER_COLUMNS].reset_index(drop=True)


def filter_completed(roster: pd.DataFrame, show_completed: bool) -> pd.DataFrame:
    if not show_completed or roster.empty:
        return roster
    return roster[roster["percent_complete"] == COMPLETED_PERCENT].reset_index(drop=True)


def summarize_roster(roster: pd.DataFrame) -> RosterSummary:
    if roster.empty:
        return RosterSummary(enrolled=0, completed=0, average_progress=None)
    progress = pd.to_numeric(roster["percent_complete"], errors="coerce")
    return RosterSummary(
        enrolled=int(len(roster)),
        completed=int((progress == COMPLETED_PERCENT).sum()),
        average_progress=float(progress.mean()) if progress.notna().any() else None,
    )


def progress_distribution(roster: pd.DataFrame) -> pd.DataFrame:
    """Count students per progress band, keeping empty bands."""
    if roster.empty:
        return pd.DataFrame({"Progress": PROGRESS_LABELS, "Students": [0] * len(PROGRESS_LABELS)})
    bands = pd.cut(
        pd.to_numeric(roster["percent_complete"], errors="coerce"),
        bins=PROGRESS_BINS,
        labels=PROGRESS_LABELS,
        include_lowest=True,
    )
    counts = bands.value_counts(sort=False).reindex(PROGRESS_LABELS, fill_value=0)
    return pd.DataFrame({"Progress": PROGRESS_LABELS, "Students": counts.astype(int).tolist()})
