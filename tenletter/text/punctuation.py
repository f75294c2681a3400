"""Terminal punctuation required by the TEN standard."""

from __future__ import annotations

from ..config import DEFAULT_CONFIG

# Endings that already close a sentence, clause or list item.
TERMINAL_PUNCTUATION = (".", ":", ";", "!", "?", ",")


def ensure_full_stop(
    text: str | None, list_item_prefix: str = DEFAULT_CONFIG.list_item_prefix
) -> str:
    """Make sure ``text`` ends with punctuation.

    The TEN standard says all titles and paragraphs should end with a full
    stop. List items end with a semicolon instead.

    Args:
        text: Line of text. ``None`` is treated as empty.
        list_item_prefix: Prefix identifying list items.

    Returns:
        ``text`` without trailing whitespace and with a terminator appended
        where necessary. Blank input returns an empty string.
    """

    if not text:
        return ""

    text = text.rstrip()
    if text and not text.endswith(TERMINAL_PUNCTUATION):
        if list_item_prefix and text.startswith(list_item_prefix):
            text += ";"
        else:
            text += "."
    return text
