"""
Utilities module for the tracker.

Provides console printing helpers built on rich, shared by the command loop
and the rendering code.
"""

from typing import Any

from rich.console import Console

# Initialize the rich console.
_console = Console(markup=True, highlight=False, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def ccapture(content: Any, **kwargs: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.
        **kwargs: Keyword arguments to pass to the console print function.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="", **kwargs)
    return capture.get()
