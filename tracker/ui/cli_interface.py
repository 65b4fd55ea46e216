"""
User interface module for the tracker.

Provides the console prompts used by the command loop: free-text answers
with optional completion, and numeric answers that are asked again until
they are valid.
"""

from typing import Any

from prompt_toolkit import ANSI, PromptSession
from prompt_toolkit.completion import WordCompleter

from tracker.core.constants import number_reprompt
from tracker.core.utils import ccapture, cprint
from tracker.core.validation import parse_bounded_int


class TrackerInterface:
    """
    Command-line interface for the initiative tracker.

    Uses prompt_toolkit for input (one session, so answers share history)
    and rich for output.
    """

    def __init__(self) -> None:
        """Initialize the interface; the prompt session is created on first use."""
        self._session: PromptSession | None = None

    @property
    def session(self) -> PromptSession:
        """Returns the prompt session, creating it if needed."""
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def ask(self, message: str, choices: list[str] | None = None) -> str:
        """
        Asks the user for a line of text.

        Args:
            message (str): The prompt, may contain rich markup. Emoji codes
                are printed as typed.
            choices (list[str] | None): Words offered for completion.

        Returns:
            str: The answer, without surrounding whitespace.

        Raises:
            EOFError: If the input is closed (Ctrl-D).
            KeyboardInterrupt: If the user interrupts the prompt (Ctrl-C).

        """
        completer = WordCompleter(choices, sentence=True) if choices else None
        answer = self.session.prompt(
            ANSI(ccapture(message, emoji=False)),
            completer=completer,
            complete_while_typing=completer is not None,
        )
        return answer.strip()

    def ask_number(self, message: str, maximum: int) -> int:
        """
        Asks the user for a whole number between 0 and `maximum`.

        Invalid answers are not errors: the question is asked again until
        the answer is valid.

        Args:
            message (str): The first prompt.
            maximum (int): The largest accepted value.

        Returns:
            int: The number typed by the user.

        """
        value = parse_bounded_int(self.ask(message), maximum)
        while value is None:
            value = parse_bounded_int(self.ask(number_reprompt(maximum)), maximum)
        return value

    def show(self, *args: Any, **kwargs: Any) -> None:
        """Prints to the tracker console."""
        cprint(*args, **kwargs)
