"""
User interface module for the Initiative Tracker.

This module holds the console prompts and the interactive command loop.
"""

from .cli_interface import TrackerInterface
from .commands import CommandLoop

__all__ = [
    "CommandLoop",
    "TrackerInterface",
]
