"""
Main entry point for the Initiative Tracker.

Sets up logging, prints the banner and runs the interactive command loop on
an empty roster. Characters are added by hand (`add`) or from a JSON roster
file (`import`), and the loop then cycles through them in initiative order.
"""

import argparse
import logging

from rich.panel import Panel

from tracker.core.constants import BANNER_TITLE
from tracker.core.logging import setup_logging
from tracker.core.utils import cprint
from tracker.roster import Roster
from tracker.ui import CommandLoop, TrackerInterface


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parses the command-line options.

    Args:
        argv (list[str] | None): The arguments, defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: The parsed options.

    """
    parser = argparse.ArgumentParser(
        prog="initiative-tracker",
        description="Interactive turn-order tracker for tabletop encounters.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log debug messages (lookups that miss, file errors, commands)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Runs the initiative tracker until the user exits."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    cprint(Panel(f"[bold]{BANNER_TITLE}[/]", expand=False, padding=(1, 1)))

    CommandLoop(Roster(), TrackerInterface()).run()


if __name__ == "__main__":
    main()
