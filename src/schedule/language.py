"""Normalization of free-text language labels into two-letter codes."""

# Applied in order as substring replacements.
LANGUAGE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("-formal", ""),
    ("German", "de"),
    ("german", "de"),
    ("Deutsch", "de"),
    ("deutsch", "de"),
    ("English", "en"),
    ("english", "en"),
    ("Englisch", "en"),
    ("englisch", "en"),
)


def normalize_language(label: str | None) -> str:
    """Map a feed language label to its short code.

    Historical feeds use long-form names ("German", "Englisch") and a
    "-formal" suffix. Unknown labels are returned unchanged.

    Args:
        label: Raw language label from the feed, may be empty or None.

    Returns:
        The normalized code, or "" for an empty label.
    """
    if not label:
        return ""
    for old, new in LANGUAGE_REPLACEMENTS:
        label = label.replace(old, new)
    return label
