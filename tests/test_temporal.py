"""Tests for start and end derivation."""

from datetime import datetime, timedelta, timezone

import pytest

from src.schedule.errors import DateParseError, IllegalStateError, PreconditionError
from src.schedule.models import Session
from src.schedule.temporal import (
    AbsoluteStart,
    LegacyStart,
    format_time,
    from_milliseconds,
    parse_date_milliseconds,
    to_milliseconds,
)
from tests.conftest import DATE_UTC, STARTS_AT, make_session

DEC_27 = to_milliseconds(datetime(2023, 12, 27, tzinfo=timezone.utc))


def test_parse_date_returns_utc_start_of_day() -> None:
    assert parse_date_milliseconds("2023-12-27") == DEC_27
    assert parse_date_milliseconds("1970-01-01") == 0


@pytest.mark.parametrize("value", ["", "27.12.2023", "2023-13-01", "2023-02-30"])
def test_parse_date_rejects_malformed_dates(value: str) -> None:
    with pytest.raises(DateParseError):
        parse_date_milliseconds(value)


def test_millisecond_conversions_round_trip() -> None:
    assert from_milliseconds(DATE_UTC) == STARTS_AT
    assert to_milliseconds(STARTS_AT) == DATE_UTC


def test_start_prefers_date_utc() -> None:
    session = make_session(date="2023-12-27", rel_start_time=660)

    assert isinstance(session.start_source(), AbsoluteStart)
    assert session.start_time_milliseconds() == DATE_UTC


def test_start_falls_back_to_legacy_fields() -> None:
    session = make_session(date_utc=0, date="2023-12-27", rel_start_time=660)

    assert session.start_source() == LegacyStart(date="2023-12-27", rel_start_time=660)
    assert session.start_time_milliseconds() == DEC_27 + 660 * 60_000


def test_start_time_moment_always_uses_legacy_fields() -> None:
    session = make_session(date="2023-12-27", rel_start_time=30)

    assert session.start_time_moment() == datetime(
        2023, 12, 27, 0, 30, tzinfo=timezone.utc
    )


def test_legacy_start_propagates_malformed_date() -> None:
    session = make_session(date_utc=0, date="not-a-date")

    with pytest.raises(DateParseError):
        session.start_time_milliseconds()


def test_starts_at_returns_absolute_instant() -> None:
    assert make_session(date_utc=DATE_UTC).starts_at() == STARTS_AT


def test_starts_at_requires_date_utc() -> None:
    session = make_session(date_utc=0)

    with pytest.raises(PreconditionError):
        session.starts_at()
    with pytest.raises(ValueError):
        session.starts_at()


@pytest.mark.parametrize("duration", [0, 1, 45, 24 * 60])
def test_ends_at_adds_duration_minutes(duration: int) -> None:
    session = make_session(duration=duration)

    assert session.end_time_milliseconds() == DATE_UTC + duration * 60_000
    assert session.ends_at() == session.starts_at() + timedelta(minutes=duration)


def test_ends_at_requires_date_utc() -> None:
    session = make_session(date_utc=0)

    with pytest.raises(IllegalStateError):
        session.ends_at()


def test_format_time_uses_offset_or_utc() -> None:
    assert format_time(DATE_UTC) == "22:13"
    assert format_time(DATE_UTC, timedelta(hours=1)) == "23:13"
    assert format_time(DATE_UTC, timedelta(hours=-5)) == "17:13"


def test_format_time_in_device_zone() -> None:
    expected = STARTS_AT.astimezone().strftime("%H:%M")

    assert format_time(DATE_UTC, timedelta(hours=3), use_device_time_zone=True) == expected


def test_formatted_start_time_reads_config(monkeypatch: pytest.MonkeyPatch) -> None:
    session = make_session(time_zone_offset=timedelta(hours=1))

    assert session.formatted_start_time(use_device_time_zone=False) == "23:13"

    monkeypatch.setenv("USE_DEVICE_TIME_ZONE", "false")
    assert session.formatted_start_time() == "23:13"


def test_fresh_session_has_no_offset() -> None:
    session = Session(session_id="1", date_utc=DATE_UTC)

    assert session.formatted_start_time(use_device_time_zone=False) == "22:13"
