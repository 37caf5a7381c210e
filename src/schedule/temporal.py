"""Time derivation for schedule sessions.

A session's start is known in one of two shapes:

  AbsoluteStart  dateUTC from the feed, milliseconds since the epoch with the
                 time zone already resolved by the importer.
  LegacyStart    a calendar date ("YYYY-MM-DD") plus relStartTime, the minutes
                 since conference start. Older feeds only carry this shape.

All instants are exchanged as integer milliseconds since the epoch (UTC) or as
timezone-aware datetimes.
"""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from src.schedule.errors import DateParseError

MILLISECONDS_OF_ONE_MINUTE = 60_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_date_milliseconds(value: str) -> int:
    """Parse a calendar date into the UTC start-of-day instant.

    Args:
        value: Date string in YYYY-MM-DD format.

    Returns:
        Milliseconds since the epoch at 00:00 UTC of that day.

    Raises:
        DateParseError: If the value is not a valid calendar date.
    """
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise DateParseError(f"Invalid date {value!r}: expected YYYY-MM-DD") from e
    return to_milliseconds(parsed.replace(tzinfo=timezone.utc))


def to_milliseconds(moment: datetime) -> int:
    """Convert an aware datetime into milliseconds since the epoch."""
    return (moment - EPOCH) // timedelta(milliseconds=1)


def from_milliseconds(milliseconds: int) -> datetime:
    """Convert milliseconds since the epoch into an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=milliseconds)


def format_time(
    milliseconds: int,
    offset: timedelta | None = None,
    *,
    use_device_time_zone: bool = False,
) -> str:
    """Format an instant as HH:MM wall-clock text.

    Args:
        milliseconds: Instant in milliseconds since the epoch.
        offset: Session time zone offset. UTC is used when None.
        use_device_time_zone: Render in the local zone of the running machine
            instead of the session offset.

    Returns:
        The formatted start time, e.g. "14:30".
    """
    moment = from_milliseconds(milliseconds)
    if use_device_time_zone:
        moment = moment.astimezone()
    elif offset is not None:
        moment = moment.astimezone(timezone(offset))
    return moment.strftime(TIME_FORMAT)


class AbsoluteStart(BaseModel):
    """Start given as an absolute instant."""

    model_config = ConfigDict(frozen=True)

    date_utc: int = Field(gt=0)

    def milliseconds(self) -> int:
        return self.date_utc


class LegacyStart(BaseModel):
    """Start given as a calendar date plus minutes since conference start."""

    model_config = ConfigDict(frozen=True)

    date: str
    rel_start_time: int = 0

    def milliseconds(self) -> int:
        """Start-of-day of ``date`` shifted by ``rel_start_time`` minutes.

        Raises:
            DateParseError: If ``date`` is malformed.
        """
        start_of_day = parse_date_milliseconds(self.date)
        return start_of_day + self.rel_start_time * MILLISECONDS_OF_ONE_MINUTE


StartSource = AbsoluteStart | LegacyStart


def resolve_start(date_utc: int, date: str, rel_start_time: int) -> StartSource:
    """Pick the start representation for the given time fields.

    The absolute instant wins whenever it is set (greater than 0).
    """
    if date_utc > 0:
        return AbsoluteStart(date_utc=date_utc)
    return LegacyStart(date=date, rel_start_time=rel_start_time)
