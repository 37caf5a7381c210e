"""Accessibility text assembly for session list items.

String lookup is left to a StringResolver supplied by the caller (the UI
layer's localization). This module only decides which fragments to request
and how to join them. Empty titles, subtitles and language codes degrade to
shorter text instead of failing.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.schedule.models import Session

# String keys
DURATION = "session_list_item_duration_content_description"
TITLE = "session_list_item_title_content_description"
SUBTITLE = "session_list_item_subtitle_content_description"
ROOM = "session_list_item_room_content_description"
SPEAKERS = "session_list_item_speakers_content_description"
TRACK = "session_list_item_track_content_description"
LANGUAGE = "session_list_item_language_content_description"
LANGUAGE_UNKNOWN = "session_list_item_language_unknown_content_description"
LANGUAGE_ENGLISH = "session_list_item_language_english_content_description"
LANGUAGE_GERMAN = "session_list_item_language_german_content_description"
LANGUAGE_PORTUGUESE = "session_list_item_language_portuguese_content_description"
START_TIME = "session_list_item_start_time_content_description"
FAVORED = "session_list_item_favored_content_description"
NOT_FAVORED = "session_list_item_not_favored_content_description"

LANGUAGE_NAME_KEYS: dict[str, str] = {
    "en": LANGUAGE_ENGLISH,
    "de": LANGUAGE_GERMAN,
    "pt": LANGUAGE_PORTUGUESE,
}

ENGLISH_TEMPLATES: dict[str, str] = {
    DURATION: "Duration: {0} minutes",
    TITLE: "Title: {0}",
    SUBTITLE: "Subtitle: {0}",
    ROOM: "Room: {0}",
    SPEAKERS + ".one": "Speaker: {0}",
    SPEAKERS + ".other": "Speakers: {0}",
    TRACK: "Track: {0}",
    LANGUAGE: "Language: {0}",
    LANGUAGE_UNKNOWN: "Unknown language",
    LANGUAGE_ENGLISH: "English",
    LANGUAGE_GERMAN: "German",
    LANGUAGE_PORTUGUESE: "Portuguese",
    START_TIME: "Starts at {0}",
    FAVORED: "Favored",
    NOT_FAVORED: "Not favored",
}


class StringResolver(Protocol):
    """Localized string lookup, provided by the UI layer."""

    def get_string(self, key: str, *args: object) -> str: ...

    def get_quantity_string(self, key: str, quantity: int, *args: object) -> str: ...


class TemplateStrings:
    """StringResolver backed by a mapping of str.format templates.

    Quantity strings are looked up as "<key>.one" for a quantity of 1 and
    "<key>.other" for anything else.
    """

    def __init__(self, templates: Mapping[str, str] = ENGLISH_TEMPLATES) -> None:
        self.templates = templates

    def get_string(self, key: str, *args: object) -> str:
        return self.templates[key].format(*args)

    def get_quantity_string(self, key: str, quantity: int, *args: object) -> str:
        plural = "one" if quantity == 1 else "other"
        return self.templates[f"{key}.{plural}"].format(*args)


def duration_content_description(strings: StringResolver, duration: int) -> str:
    return strings.get_string(DURATION, duration)


def title_content_description(strings: StringResolver, title: str) -> str:
    return strings.get_string(TITLE, title) if title else ""


def subtitle_content_description(strings: StringResolver, subtitle: str) -> str:
    return strings.get_string(SUBTITLE, subtitle) if subtitle else ""


def room_name_content_description(strings: StringResolver, room_name: str) -> str:
    return strings.get_string(ROOM, room_name)


def speakers_content_description(
    strings: StringResolver, speakers_count: int, formatted_speaker_names: str
) -> str:
    return strings.get_quantity_string(
        SPEAKERS, speakers_count, formatted_speaker_names
    )


def formatted_track_content_description(
    strings: StringResolver, track_name: str, language_code: str
) -> str:
    """Track clause, followed by "; <language clause>" when a code is known."""
    description = strings.get_string(TRACK, track_name)
    if language_code:
        description += "; " + language_content_description(strings, language_code)
    return description


def language_content_description(strings: StringResolver, language_code: str) -> str:
    """Spoken language clause.

    Known codes resolve to a localized language name, other codes are used
    verbatim. An empty code yields the "unknown language" text.
    """
    if not language_code:
        return strings.get_string(LANGUAGE_UNKNOWN)
    name_key = LANGUAGE_NAME_KEYS.get(language_code)
    language_name = strings.get_string(name_key) if name_key else language_code
    return strings.get_string(LANGUAGE, language_name)


def start_time_content_description(strings: StringResolver, start_time_text: str) -> str:
    return strings.get_string(START_TIME, start_time_text)


def highlight_content_description(strings: StringResolver, is_highlighted: bool) -> str:
    return strings.get_string(FAVORED if is_highlighted else NOT_FAVORED)


def state_content_description(
    strings: StringResolver, session: "Session", start_time_text: str
) -> str:
    """Favored state, start time and room, joined by ", ".

    Args:
        strings: Localized string lookup.
        session: Session to describe.
        start_time_text: Pre-formatted start time, see temporal.format_time().

    Returns:
        e.g. "Favored, Starts at 14:30, Room: Saal 1".
    """
    return ", ".join(
        (
            highlight_content_description(strings, session.highlight),
            start_time_content_description(strings, start_time_text),
            room_name_content_description(strings, session.room_name),
        )
    )
