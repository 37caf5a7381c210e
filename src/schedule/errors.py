"""Error hierarchy for session time derivation and schedule diffing.

Every error raised by this package derives from SessionError so callers can
catch the whole family at once. The concrete classes also inherit from the
builtin they refine, which keeps plain ``except ValueError`` call sites working.

Example usage:
    try:
        starts_at = session.starts_at()
    except PreconditionError:
        starts_at = None  # legacy-only feed item
"""


class SessionError(Exception):
    """Base exception for all session errors."""

    pass


class PreconditionError(SessionError, ValueError):
    """A strict accessor was called on a session lacking the required state.

    Examples: reading the absolute start of a session whose dateUTC is unset.
    This is a programming error at the call site and is never retried.
    """

    pass


class IllegalStateError(SessionError, RuntimeError):
    """A derivation was requested that the session's current state cannot support.

    Examples: computing the end instant of a legacy-only session.
    """

    pass


class DateParseError(SessionError, ValueError):
    """A legacy calendar date string could not be parsed.

    Raised by the date parser and propagated unchanged by the session.
    """

    pass
