"""Pydantic model for a scheduled conference session.

A Session is one talk, workshop or similar time-boxed item of a conference
schedule, keyed by the feed's stable ``session_id``. The schedule diff copies
the freshly parsed session, records what changed on the copy's ChangeFlags and
hands it to notification and list rendering code.

Equality is deliberately narrower than the field list: only feed-authoritative
content listed in EQUALITY_FIELDS takes part. Presentation aliases, importer
computed hints, user state and change flags do not.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from src.schedule.changes import ChangeFlags
from src.schedule.config import get_config
from src.schedule.errors import IllegalStateError, PreconditionError
from src.schedule.language import normalize_language
from src.schedule.logging import get_logger
from src.schedule.temporal import (
    MILLISECONDS_OF_ONE_MINUTE,
    LegacyStart,
    StartSource,
    format_time,
    from_milliseconds,
    resolve_start,
)

log = get_logger(__name__)

# Order matters for hashing only; keep it stable.
EQUALITY_FIELDS: tuple[str, ...] = (
    "feedback_url",
    "day",
    "duration",
    "recording_opt_out",
    "start_time",
    "date",
    "language",
    "session_id",
    "recording_license",
    "room_name",
    "room_identifier",
    "speakers",
    "subtitle",
    "title",
    "track",
    "type",
    "date_utc",
    "time_zone_offset",
)

EXCLUDED_FROM_EQUALITY: frozenset[str] = frozenset(
    {
        "slug",
        "url",
        "abstract",
        "description",
        "links",
        "highlight",
        "has_alarm",
        "room_index",
        "rel_start_time",
        "changes",
    }
)


class Session(BaseModel):
    """A lecture, a workshop or any similar time-framed happening."""

    model_config = ConfigDict(validate_assignment=True)

    # Identity
    session_id: str = Field(min_length=1, frozen=True)
    slug: str = ""
    url: str = ""
    feedback_url: str | None = None  # e.g. "https://talks.event.net/2023/talk/V8LUNA/feedback"

    # Content
    title: str = ""
    subtitle: str = ""
    abstract: str = ""
    description: str = ""
    links: str | None = ""  # Comma separated Markdown links
    track: str = ""
    type: str = ""
    language: str = ""  # Raw feed label, see language_text()
    recording_license: str = ""
    recording_opt_out: bool = False

    # Placement
    day: int = 0  # Feed values start with 1
    room_name: str = ""
    room_identifier: str = ""  # e.g. "bccb6a5b-b26b-4f17-90b9-b5966f5e34d8"
    room_index: int = 0  # Room sort hint written by the importer, not for logic

    # Time
    date: str = ""  # YYYY-MM-DD
    date_utc: int = Field(default=0, ge=0)  # milliseconds, 0 = unset
    time_zone_offset: timedelta | None = None
    start_time: int = 0  # minutes since day start
    rel_start_time: int = 0  # minutes since conference start
    duration: int = Field(default=0, ge=0)  # minutes

    # Replaced as a whole, never mutated in place
    speakers: tuple[str, ...] = ()

    # User state
    highlight: bool = False
    has_alarm: bool = False

    changes: ChangeFlags = Field(default_factory=ChangeFlags)

    @classmethod
    def copy_of(cls, session: "Session") -> "Session":
        """Copy construction.

        Text and primitive fields are copied by value and the speakers tuple is
        shared. The change flags are duplicated so that flagging the copy never
        touches the original.

        Args:
            session: Session to copy.

        Returns:
            An independent Session equal to ``session``.
        """
        return session.model_copy(update={"changes": session.changes.model_copy()})

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def comparison_key(self) -> tuple:
        """Values of EQUALITY_FIELDS, in order."""
        return tuple(getattr(self, name) for name in EQUALITY_FIELDS)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Session):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.comparison_key() == other.comparison_key()

    def __hash__(self) -> int:
        return hash(self.comparison_key())

    # ------------------------------------------------------------------
    # Change flags
    # ------------------------------------------------------------------
    def is_changed(self) -> bool:
        return self.changes.is_changed()

    def cancel(self) -> None:
        """Mark the session as cancelled, discarding all content change flags."""
        self.changes.cancel()
        log.debug("session_cancelled", session_id=self.session_id)

    def changed_state_string(self) -> str:
        return self.changes.state_string()

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------
    def start_source(self) -> StartSource:
        """The start representation in effect: absolute if dateUTC is set, legacy otherwise."""
        return resolve_start(self.date_utc, self.date, self.rel_start_time)

    def start_time_moment(self) -> datetime:
        """Start derived from the legacy date and relStartTime fields only.

        Raises:
            DateParseError: If ``date`` is malformed.
        """
        legacy = LegacyStart(date=self.date, rel_start_time=self.rel_start_time)
        return from_milliseconds(legacy.milliseconds())

    def start_time_milliseconds(self) -> int:
        """Start in milliseconds.

        dateUTC takes precedence when it is greater than 0. Otherwise the start
        is derived from the legacy date and relStartTime fields.

        Raises:
            DateParseError: If the legacy path is taken and ``date`` is malformed.
        """
        return self.start_source().milliseconds()

    def starts_at(self) -> datetime:
        """Start taken from dateUTC only, without the legacy fallback.

        Raises:
            PreconditionError: If dateUTC is not greater than 0.
        """
        if self.date_utc <= 0:
            raise PreconditionError("Field 'date_utc' must be more than 0.")
        return from_milliseconds(self.date_utc)

    def end_time_milliseconds(self) -> int:
        """dateUTC plus the duration, in milliseconds.

        Raises:
            IllegalStateError: If dateUTC is not set.
        """
        if self.date_utc <= 0:
            raise IllegalStateError(
                f"Session {self.session_id!r} has no 'date_utc' to derive its end from."
            )
        return self.date_utc + self.duration * MILLISECONDS_OF_ONE_MINUTE

    def ends_at(self) -> datetime:
        return from_milliseconds(self.end_time_milliseconds())

    def formatted_start_time(self, use_device_time_zone: bool | None = None) -> str:
        """Start time as HH:MM for the state content description.

        Args:
            use_device_time_zone: Render in the local zone instead of the session
                offset. Defaults to the configured ``use_device_time_zone``.
        """
        if use_device_time_zone is None:
            use_device_time_zone = get_config().use_device_time_zone
        return format_time(
            self.date_utc,
            self.time_zone_offset,
            use_device_time_zone=use_device_time_zone,
        )

    # ------------------------------------------------------------------
    # Display text
    # ------------------------------------------------------------------
    @property
    def links_text(self) -> str:
        return self.links or ""

    def formatted_speakers(self) -> str:
        """Speaker names joined by ", " in feed order."""
        return ", ".join(self.speakers)

    def language_text(self) -> str:
        return normalize_language(self.language)

    def formatted_track_language_text(self) -> str:
        """Track followed by the language code in brackets, e.g. "Security [de]"."""
        if not self.language:
            return self.track
        return f"{self.track} [{self.language_text()}]"

    def shift_room_index_by(self, amount: int) -> None:
        self.room_index += amount
