"""
Roster module for the Initiative Tracker.

This module holds the ordered roster with its turn cursor and the functions
that import it from and export it to JSON roster files.
"""

from .roster import Roster
from .roster_io import (
    export_file,
    import_file,
    load_records,
    save_records,
)

__all__ = [
    # Import from roster.py
    "Roster",
    # Import from roster_io.py
    "export_file",
    "import_file",
    "load_records",
    "save_records",
]
