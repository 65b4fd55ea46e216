"""
Core system module for the Initiative Tracker.

This module contains the constants, exceptions, logging setup and validation
helpers shared by the character model, the roster and the command loop.
"""

from .errors import (
    EmptyRosterError,
    RosterIOError,
    TrackerError,
)
from .utils import (
    ccapture,
    cprint,
)
from .validation import (
    parse_bounded_int,
    require_in_range,
)

__all__ = [
    # Import from errors.py
    "EmptyRosterError",
    "RosterIOError",
    "TrackerError",
    # Import from utils.py
    "ccapture",
    "cprint",
    # Import from validation.py
    "parse_bounded_int",
    "require_in_range",
]
