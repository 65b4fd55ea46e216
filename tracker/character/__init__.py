"""
Character module for the Initiative Tracker.

This module holds the character model, its panel rendering and the
conversion to and from the records stored in roster files.
"""

from .character_display import panel_width, render_panel
from .character_serialization import (
    CharacterRecord,
    character_from_record,
    dump_records,
    parse_records,
    record_from_character,
)
from .main import Character

__all__ = [
    "Character",
    "CharacterRecord",
    "character_from_record",
    "dump_records",
    "panel_width",
    "parse_records",
    "record_from_character",
    "render_panel",
]
