"""Change flags recorded on a session by the schedule diff.

Each content family of a session (title, room, time, ...) carries one boolean
that a diffing pass sets when the family differs from the previous import.
``is_new`` and ``is_canceled`` are lifecycle markers rather than content edits
and never count towards ``is_changed()``.

Flags are only cleared by ``cancel()`` or by building a fresh session; reading
them has no side effects.
"""

from pydantic import BaseModel, ConfigDict

CONTENT_FAMILIES: tuple[str, ...] = (
    "title",
    "subtitle",
    "room_name",
    "day",
    "time",
    "duration",
    "speakers",
    "recording_opt_out",
    "language",
    "track",
)

LIFECYCLE_MARKERS: tuple[str, ...] = ("is_new", "is_canceled")


class ChangeFlags(BaseModel):
    """Mutable bundle of per-family change flags.

    Kept apart from the session's content fields so a diffing pass can be
    handed write access to the flags alone.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: bool = False
    subtitle: bool = False
    room_name: bool = False
    day: bool = False
    time: bool = False
    duration: bool = False
    speakers: bool = False
    recording_opt_out: bool = False
    language: bool = False
    track: bool = False
    is_new: bool = False
    is_canceled: bool = False

    def is_changed(self) -> bool:
        """True if any content family changed. Lifecycle markers are ignored."""
        return any(getattr(self, family) for family in CONTENT_FAMILIES)

    def changed_families(self) -> list[str]:
        return [family for family in CONTENT_FAMILIES if getattr(self, family)]

    def cancel(self) -> None:
        """Mark as cancelled and drop every other flag."""
        for family in CONTENT_FAMILIES:
            setattr(self, family, False)
        self.is_new = False
        self.is_canceled = True

    def state_string(self) -> str:
        """Diagnostic rendering of all twelve flags in a fixed order."""
        states = ", ".join(
            f"changed_{name}={getattr(self, name)}"
            for name in CONTENT_FAMILIES + LIFECYCLE_MARKERS
        )
        return f"Session({states})"
