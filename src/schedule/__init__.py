"""Conference schedule session model and change detection.

Holds the canonical in-memory Session of one schedule item, derives its start
and end instants, and flags which content families changed between two
imports of the same schedule.
"""

from src.schedule.changes import ChangeFlags
from src.schedule.diff import ScheduleDiff, compute_schedule_diff, mark_changes
from src.schedule.errors import (
    DateParseError,
    IllegalStateError,
    PreconditionError,
    SessionError,
)
from src.schedule.language import normalize_language
from src.schedule.models import EQUALITY_FIELDS, EXCLUDED_FROM_EQUALITY, Session

__all__ = [
    "Session",
    "ChangeFlags",
    "ScheduleDiff",
    "compute_schedule_diff",
    "mark_changes",
    "normalize_language",
    "EQUALITY_FIELDS",
    "EXCLUDED_FROM_EQUALITY",
    "SessionError",
    "PreconditionError",
    "IllegalStateError",
    "DateParseError",
]
