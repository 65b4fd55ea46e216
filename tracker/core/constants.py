"""
Constants for the initiative tracker.

Defines numeric limits for character fields, user-facing messages, the
command help table and other values shared throughout the tracker.
"""

# Upper bounds of the numeric character fields (lower bound is always 0).
MAX_AC = 255
MAX_HP = 65535
MAX_SCORE = 255

# Smallest inner width of a character panel.
MIN_PANEL_WIDTH = 15

# JSON indentation used when exporting the roster.
EXPORT_INDENT = 2

BANNER_TITLE = "Initiative Tracker!"

# User-facing messages.
MSG_EMPTY_ROSTER = "Initiative order is empty"
MSG_INVALID_IMPORT_PATH = "Provided path is not valid"
MSG_INVALID_IMPORT_FORMAT = (
    "The provided file is not JSON or is not in the expected format."
)
MSG_INVALID_EXPORT_PATH = "Path is invalid or file already exists"
MSG_EXPORT_WRITE_FAILED = "Could not save to file"
MSG_UNKNOWN_COMMAND = "Sorry, I didn't understand that."
MSG_CANCELLED = "Cancelled."


def number_reprompt(maximum: int) -> str:
    """
    Returns the message shown when a numeric answer is rejected.

    Args:
        maximum (int): The largest accepted value.

    Returns:
        str: The re-prompt message.

    """
    return f"Enter a number between 0-{maximum}: "


# Command name -> help line, in the order shown by `help`.
COMMAND_HELP: dict[str, str] = {
    "import": "Add characters to initiative order from a compatible JSON file",
    "export": "Save initiative order to JSON file that can be imported",
    "add": "Add character to initiative order manually",
    "next": "Advance initiative order to the next turn",
    "exit": "Close this program",
    "display": "Print the full initiative order to the console",
    "current": "Print the current turn to the console",
    "show": "Print a specific character to the console",
    "damage": "Deal damage to a specified character",
    "heal": "Heal a specified character",
    "temp": "Grant temporary HP to a specified character",
    "remove": "Remove a specified character from the initiative order",
    "top": (
        "Set the current turn to the first in initiative order "
        "(useful after adding initial characters)"
    ),
}
