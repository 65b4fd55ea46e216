"""
Exceptions raised by the roster engine and its file import/export.

Every exception carries the one-line message shown to the user, so the
command loop can print ``str(error)`` directly.
"""

from .constants import MSG_EMPTY_ROSTER


class TrackerError(Exception):
    """Base class for recoverable tracker errors."""


class EmptyRosterError(TrackerError):
    """Raised when an operation needs at least one character in the roster."""

    def __init__(self, message: str = MSG_EMPTY_ROSTER) -> None:
        super().__init__(message)


class RosterIOError(TrackerError):
    """Raised when reading or writing a roster file fails."""
