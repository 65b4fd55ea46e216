"""
Input validation helpers for user answers and character fields.
"""

from typing import Any

from catchery import log_warning


def parse_bounded_int(text: str, maximum: int) -> int | None:
    """
    Parses a user answer as an integer between 0 and `maximum`.

    Args:
        text (str): The raw answer typed by the user.
        maximum (int): The largest accepted value.

    Returns:
        int | None: The parsed value, or None if the answer is not a whole
        number in range.

    """
    text = text.strip().removeprefix("+")
    # Unsigned digits only: "-0", "1_0" and "٣" are rejected.
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    if value > maximum:
        return None
    return value


def require_in_range(
    value: Any, param_name: str, maximum: int, context: dict[str, Any] | None = None
) -> int:
    """
    Validates that a value is an integer between 0 and `maximum`.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        maximum: The largest accepted value
        context: Additional context for logging

    Returns:
        int: The validated value

    Raises:
        ValueError: If validation fails

    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        log_warning(
            f"{param_name} must be an integer between 0 and {maximum}, got: {value}",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "type": type(value).__name__,
            },
        )
        raise ValueError(f"Invalid {param_name}: {value}")
    return value
