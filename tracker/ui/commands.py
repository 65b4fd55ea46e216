"""
Command loop module for the tracker.

Reads one command per line, collects the arguments it needs through the
interface prompts, runs it against the roster and prints the result.
"""

from collections.abc import Callable

from rich.markup import escape
from rich.table import Table

from tracker.character import Character, CharacterRecord, render_panel
from tracker.core.constants import (
    COMMAND_HELP,
    MAX_AC,
    MAX_HP,
    MAX_SCORE,
    MSG_CANCELLED,
    MSG_EMPTY_ROSTER,
    MSG_UNKNOWN_COMMAND,
)
from tracker.core.errors import TrackerError
from tracker.core.logging import get_logger
from tracker.roster import Roster, export_file, import_file

from .cli_interface import TrackerInterface

logger = get_logger(__name__)


class CommandLoop:
    """
    Interactive read-prompt-print loop driving a roster.

    Attributes:
        roster (Roster):
            The roster the commands act upon.
        ui (TrackerInterface):
            The interface used for prompts and output.

    """

    def __init__(self, roster: Roster, ui: TrackerInterface) -> None:
        self.roster = roster
        self.ui = ui
        self.commands: dict[str, Callable[[], None]] = {
            "help": self.cmd_help,
            "import": self.cmd_import,
            "export": self.cmd_export,
            "add": self.cmd_add,
            "next": self.cmd_next,
            "display": self.cmd_display,
            "current": self.cmd_current,
            "show": self.cmd_show,
            "damage": self.cmd_damage,
            "heal": self.cmd_heal,
            "temp": self.cmd_temp,
            "remove": self.cmd_remove,
            "top": self.cmd_top,
        }

    def run(self) -> None:
        """Runs commands until `exit` or the end of input."""
        while True:
            try:
                command = self.ui.ask(
                    "[bold cyan]>[/] ", list(self.commands) + ["exit"]
                )
            except (EOFError, KeyboardInterrupt):
                break
            self.ui.show()
            if not self.execute(command):
                break
            self.ui.show()

    def execute(self, command: str) -> bool:
        """
        Runs a single command.

        Args:
            command (str): The command name typed by the user.

        Returns:
            bool: False if the command asks to leave the loop, True otherwise.

        """
        command = command.strip()
        if command == "exit":
            return False
        handler = self.commands.get(command)
        if handler is None:
            self.ui.show(MSG_UNKNOWN_COMMAND)
            return True
        logger.debug("Running command %s", command)
        try:
            handler()
        except TrackerError as e:
            self.ui.show(f"[red]{escape(str(e))}[/]")
        except (EOFError, KeyboardInterrupt):
            # Aborted in a sub-prompt, the command has not touched the roster.
            self.ui.show(MSG_CANCELLED)
        return True

    # ============================================================================
    # OUTPUT HELPERS
    # ============================================================================

    def show_character(self, character: Character) -> None:
        """Prints the panel of a character, dimmed if it is down."""
        # Names are printed as typed, so the panel borders line up.
        self.ui.show(
            render_panel(character),
            markup=False,
            emoji=False,
            style="dim" if character.is_down else None,
        )

    def show_current(self) -> None:
        """Prints the character whose turn it is."""
        character = self.roster.current()
        if character is None:
            self.ui.show(MSG_EMPTY_ROSTER)
            return
        self.show_character(character)

    def ask_name(self) -> str:
        """Asks for a character name, completing on the roster names."""
        return self.ui.ask("Name: ", self.roster.names())

    def ask_score(self, record: CharacterRecord) -> int:
        """Asks for the initiative score of an imported record."""
        return self.ui.ask_number(f"{escape(record.name)}: ", MAX_SCORE)

    # ============================================================================
    # COMMANDS
    # ============================================================================

    def cmd_help(self) -> None:
        """Prints the available commands."""
        table = Table(title="Available commands", pad_edge=False)
        table.add_column("Command", style="cyan", no_wrap=True)
        table.add_column("Description")
        for name, description in COMMAND_HELP.items():
            table.add_row(name, description)
        self.ui.show(table)

    def cmd_import(self) -> None:
        """Adds the characters of a JSON roster file."""
        path = self.ui.ask("Enter path to JSON: ")
        added = import_file(self.roster, path, self.ask_score)
        logger.info("Imported %d character(s) from %s", len(added), path)

    def cmd_export(self) -> None:
        """Saves the roster to a new JSON roster file."""
        path = self.ui.ask("Enter target path for JSON file: ")
        export_file(self.roster, path)
        logger.info("Exported %d character(s) to %s", len(self.roster), path)

    def cmd_add(self) -> None:
        """Adds a character typed in by the user."""
        name = self.ui.ask("Name: ")
        ac = self.ui.ask_number("AC: ", MAX_AC)
        max_hp = self.ui.ask_number("HP: ", MAX_HP)
        score = self.ui.ask_number("Score: ", MAX_SCORE)
        self.ui.show()
        self.roster.insert(Character(name=name, ac=ac, max_hp=max_hp, score=score))

    def cmd_next(self) -> None:
        """Passes the turn on and prints the new current character."""
        self.roster.advance()
        self.show_current()

    def cmd_display(self) -> None:
        """Prints every character, in initiative order."""
        if not self.roster:
            self.ui.show(MSG_EMPTY_ROSTER)
            return
        for character in self.roster:
            self.show_character(character)

    def cmd_current(self) -> None:
        """Prints the current character."""
        self.show_current()

    def cmd_show(self) -> None:
        """Prints a character chosen by name."""
        name = self.ask_name()
        self.ui.show()
        character = self.roster.find(name)
        if character is not None:
            self.show_character(character)

    def cmd_damage(self) -> None:
        """Deals damage to a character chosen by name."""
        name = self.ask_name()
        amount = self.ui.ask_number("Amount: ", MAX_HP)
        self.roster.damage(name, amount)

    def cmd_heal(self) -> None:
        """Heals a character chosen by name."""
        name = self.ask_name()
        amount = self.ui.ask_number("Amount: ", MAX_HP)
        self.roster.heal(name, amount)

    def cmd_temp(self) -> None:
        """Grants temporary hit points to a character chosen by name."""
        name = self.ask_name()
        amount = self.ui.ask_number("Amount: ", MAX_HP)
        self.roster.grant_temp(name, amount)

    def cmd_remove(self) -> None:
        """Removes a character chosen by name."""
        name = self.ask_name()
        self.roster.remove(name)

    def cmd_top(self) -> None:
        """Gives the turn back to the head of the order and prints it."""
        self.roster.reset_to_head()
        self.show_current()
