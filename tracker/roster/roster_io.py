"""
Roster file import and export.

Reads and writes the JSON roster files and translates every failure into a
RosterIOError carrying the message shown to the user.
"""

from collections.abc import Callable
from pathlib import Path

from catchery import log_debug
from pydantic import ValidationError

from tracker.character import (
    Character,
    CharacterRecord,
    dump_records,
    parse_records,
)
from tracker.core.constants import (
    MSG_EXPORT_WRITE_FAILED,
    MSG_INVALID_EXPORT_PATH,
    MSG_INVALID_IMPORT_FORMAT,
    MSG_INVALID_IMPORT_PATH,
)
from tracker.core.errors import RosterIOError

from .roster import Roster


def load_records(file_path: Path | str) -> list[CharacterRecord]:
    """
    Loads the character records stored in a roster file.

    Args:
        file_path (Path | str):
            The path of the JSON file to read.

    Returns:
        list[CharacterRecord]:
            The records, in file order.

    Raises:
        RosterIOError:
            If the file cannot be read or does not match the roster format.

    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log_debug(
            f"Failed to read roster file {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "roster_file_loading",
            },
        )
        raise RosterIOError(MSG_INVALID_IMPORT_PATH) from e
    try:
        return parse_records(text)
    except ValidationError as e:
        log_debug(
            f"Invalid roster file {file_path}: {e.error_count()} error(s)",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "roster_file_loading",
            },
        )
        raise RosterIOError(MSG_INVALID_IMPORT_FORMAT) from e


def save_records(file_path: Path | str, records: list[CharacterRecord]) -> None:
    """
    Writes character records to a new roster file.

    Existing files are never overwritten.

    Args:
        file_path (Path | str):
            The path of the JSON file to create.
        records (list[CharacterRecord]):
            The records to store.

    Raises:
        RosterIOError:
            If the file already exists, cannot be created, or cannot be
            written.

    """
    content = dump_records(records)
    try:
        with open(file_path, "x", encoding="utf-8") as f:
            try:
                f.write(content)
            except OSError as e:
                log_debug(
                    f"Failed to write roster file {file_path}: {e}",
                    {
                        "file_path": str(file_path),
                        "error": str(e),
                        "context": "roster_file_saving",
                    },
                )
                raise RosterIOError(MSG_EXPORT_WRITE_FAILED) from e
    except OSError as e:
        log_debug(
            f"Failed to create roster file {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "roster_file_saving",
            },
        )
        raise RosterIOError(MSG_INVALID_EXPORT_PATH) from e


def import_file(
    roster: Roster,
    file_path: Path | str,
    score_for: Callable[[CharacterRecord], int],
) -> list[Character]:
    """
    Adds the characters of a roster file to the roster.

    The file is read and validated completely before any score is asked for,
    so a bad file leaves the roster unchanged.

    Args:
        roster (Roster):
            The roster to add the characters to.
        file_path (Path | str):
            The path of the JSON file to read.
        score_for (Callable[[CharacterRecord], int]):
            Returns the initiative score of a record.

    Returns:
        list[Character]:
            The added characters, in file order.

    Raises:
        RosterIOError:
            If the file cannot be read or does not match the roster format.

    """
    records = load_records(file_path)
    return roster.import_records(records, score_for)


def export_file(roster: Roster, file_path: Path | str) -> None:
    """
    Saves the roster to a new roster file.

    Args:
        roster (Roster):
            The roster to save.
        file_path (Path | str):
            The path of the JSON file to create.

    Raises:
        EmptyRosterError:
            If the roster has no characters; no file is created.
        RosterIOError:
            If the file cannot be created or written.

    """
    save_records(file_path, roster.export_records())
