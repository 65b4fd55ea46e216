"""
Tests for the input validation helpers.
"""

import pytest
from tracker.core.validation import parse_bounded_int, require_in_range


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("255", 255),
        ("  42 ", 42),
        ("+7", 7),
        ("007", 7),
    ],
)
def test_parse_bounded_int_accepts(text, expected):
    """
    Test that whole numbers in range are parsed.
    """
    assert parse_bounded_int(text, 255) == expected


@pytest.mark.parametrize("text", ["", "256", "-1", "-0", "3.5", "ten", "1_0", "٣"])
def test_parse_bounded_int_rejects(text):
    """
    Test that anything but an unsigned number in range is rejected.
    """
    assert parse_bounded_int(text, 255) is None


def test_require_in_range():
    """
    Test that values in range are returned and others raise ValueError.
    """
    assert require_in_range(65535, "hp", 65535) == 65535
    with pytest.raises(ValueError, match="Invalid hp"):
        require_in_range(65536, "hp", 65535)
    with pytest.raises(ValueError):
        require_in_range("3", "hp", 65535)
