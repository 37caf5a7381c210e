"""Tests for the change-flag state machine."""

import pytest

from src.schedule.changes import CONTENT_FAMILIES, ChangeFlags
from tests.conftest import make_session


def test_fresh_flags_are_unchanged() -> None:
    flags = ChangeFlags()

    assert not flags.is_changed()
    assert flags.changed_families() == []


@pytest.mark.parametrize("family", CONTENT_FAMILIES)
def test_any_content_family_marks_changed(family: str) -> None:
    session = make_session()
    setattr(session.changes, family, True)

    assert session.is_changed()
    assert session.changes.changed_families() == [family]


@pytest.mark.parametrize("marker", ["is_new", "is_canceled"])
def test_lifecycle_markers_do_not_mark_changed(marker: str) -> None:
    session = make_session()
    setattr(session.changes, marker, True)

    assert not session.is_changed()


def test_cancel_clears_content_flags_and_is_new() -> None:
    session = make_session()
    for family in CONTENT_FAMILIES:
        setattr(session.changes, family, True)
    session.changes.is_new = True

    session.cancel()

    assert session.changes.is_canceled
    assert not session.changes.is_new
    assert all(not getattr(session.changes, family) for family in CONTENT_FAMILIES)
    assert not session.is_changed()


def test_cancel_is_idempotent() -> None:
    session = make_session()

    session.cancel()
    session.cancel()

    assert session.changes == ChangeFlags(is_canceled=True)


def test_equality_check_does_not_reset_flags() -> None:
    session = make_session()
    session.changes.title = True

    assert session == make_session()
    assert session.changes.title


def test_flags_reject_non_boolean_values() -> None:
    flags = ChangeFlags()

    with pytest.raises(ValueError):
        flags.title = "sometimes"


def test_state_string_lists_every_flag() -> None:
    session = make_session()
    session.changes.room_name = True
    session.changes.is_new = True

    assert session.changed_state_string() == (
        "Session("
        "changed_title=False, changed_subtitle=False, changed_room_name=True, "
        "changed_day=False, changed_time=False, changed_duration=False, "
        "changed_speakers=False, changed_recording_opt_out=False, "
        "changed_language=False, changed_track=False, "
        "changed_is_new=True, changed_is_canceled=False)"
    )
