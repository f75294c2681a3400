"""Tests for number formatting."""

import pytest

from tenletter.text import format_number


@pytest.mark.parametrize(
    ("number", "expected"),
    [(0, "00"), (1, "01"), (9, "09"), (10, "10"), (99, "99"), (123, "123")],
)
def test_format_number(number: int, expected: str) -> None:
    """Numbers are padded to two digits."""

    assert format_number(number) == expected
