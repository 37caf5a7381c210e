"""
Diff-based change detection between two imports of a schedule.

Compares the sessions of a newly parsed schedule against the previous import
and produces flagged copies of the new sessions: which content families
changed, which sessions are new and which disappeared (cancelled).

Identity key: session_id
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from src.schedule.logging import get_logger
from src.schedule.models import Session

log = get_logger(__name__)

# Content family -> session fields compared for it.
FAMILY_FIELDS: dict[str, tuple[str, ...]] = {
    "title": ("title",),
    "subtitle": ("subtitle",),
    "room_name": ("room_name",),
    "day": ("day",),
    "time": ("start_time", "date", "date_utc"),
    "duration": ("duration",),
    "speakers": ("speakers",),
    "recording_opt_out": ("recording_opt_out",),
    "language": ("language",),
    "track": ("track",),
}


class ScheduleDiff(BaseModel):
    """Result of compute_schedule_diff().

    All sessions are copies; the inputs are never mutated.
    """

    added: list[Session] = Field(default_factory=list)
    removed: list[Session] = Field(default_factory=list)
    changed: list[Session] = Field(default_factory=list)
    unchanged_count: int = 0

    @property
    def found_changes(self) -> bool:
        return bool(self.added or self.removed or self.changed)

    def sessions(self) -> list[Session]:
        """Every session worth notifying about: added, changed, then removed."""
        return [*self.added, *self.changed, *self.removed]


def mark_changes(old: Session, new: Session) -> Session:
    """Flag the content families in which ``new`` differs from ``old``.

    Args:
        old: Session from the previous import.
        new: Freshly parsed session with the same session_id.

    Returns:
        A copy of ``new`` with change flags set and the user's highlight and
        alarm state carried over from ``old``.
    """
    flagged = Session.copy_of(new)
    for family, fields in FAMILY_FIELDS.items():
        if any(getattr(old, name) != getattr(new, name) for name in fields):
            setattr(flagged.changes, family, True)

    # User state lives on the old instance
    flagged.highlight = old.highlight
    flagged.has_alarm = old.has_alarm
    return flagged


def compute_schedule_diff(
    old_sessions: Iterable[Session],
    new_sessions: Iterable[Session],
) -> ScheduleDiff:
    """Compare a new schedule against the previous import.

    Sessions that differ only outside the tracked content families (for
    example the recording license) count as unchanged, since there is nothing
    to notify about.

    Args:
        old_sessions: Sessions of the previous import.
        new_sessions: Sessions of the new import.

    Returns:
        ScheduleDiff with added sessions flagged ``is_new``, removed sessions
        cancelled, and changed sessions flagged per content family.
    """
    old_by_id = {session.session_id: session for session in old_sessions}
    new_by_id = {session.session_id: session for session in new_sessions}

    diff = ScheduleDiff()

    for session_id, new in new_by_id.items():
        old = old_by_id.get(session_id)
        if old is None:
            added = Session.copy_of(new)
            added.changes.is_new = True
            diff.added.append(added)
        elif old == new:
            diff.unchanged_count += 1
        else:
            flagged = mark_changes(old, new)
            if flagged.is_changed():
                diff.changed.append(flagged)
            else:
                diff.unchanged_count += 1

    for session_id, old in old_by_id.items():
        if session_id not in new_by_id:
            removed = Session.copy_of(old)
            removed.cancel()
            diff.removed.append(removed)

    log.info(
        "schedule_diff_computed",
        added=len(diff.added),
        removed=len(diff.removed),
        changed=len(diff.changed),
        unchanged=diff.unchanged_count,
    )
    for session in diff.changed:
        log.debug(
            "session_changed",
            session_id=session.session_id,
            families=session.changes.changed_families(),
        )
    return diff
