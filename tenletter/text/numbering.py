"""Article and section numbers."""

from __future__ import annotations


def format_number(number: int) -> str:
    """Return ``number`` zero-padded to two digits, e.g. ``"07"``."""

    return f"{number:02d}"
