"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from src.schedule.config import reset_config
from src.schedule.models import Session

# 2023-11-14T22:13:20Z
DATE_UTC = 1_700_000_000_000
STARTS_AT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def make_session(session_id: str = "7001", **fields) -> Session:
    """A fully populated session as a feed importer would produce it."""
    values = {
        "title": "Hacking the Planet",
        "subtitle": "A retrospective",
        "feedback_url": "https://talks.example.org/2023/talk/V8LUNA/feedback",
        "url": "https://talks.example.org/2023/talk/V8LUNA",
        "slug": "2023-7001-hacking-the-planet",
        "abstract": "Short abstract.",
        "description": "Long description.",
        "links": "[Slides](https://example.org/slides.pdf)",
        "track": "Security",
        "type": "lecture",
        "language": "de",
        "recording_license": "CC BY 4.0",
        "day": 1,
        "room_name": "Saal 1",
        "room_identifier": "bccb6a5b-b26b-4f17-90b9-b5966f5e34d8",
        "room_index": 2,
        "date": "2023-11-14",
        "date_utc": DATE_UTC,
        "time_zone_offset": timedelta(hours=1),
        "start_time": 1393,
        "rel_start_time": 1393,
        "duration": 45,
        "speakers": ("Jane Doe", "Alex Roe"),
    }
    values.update(fields)
    return Session(session_id=session_id, **values)


@pytest.fixture
def session() -> Session:
    return make_session()


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()
