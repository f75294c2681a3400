"""Hard-wrap plain text at a fixed column width."""

from __future__ import annotations

from ..config import DEFAULT_CONFIG
from .punctuation import ensure_full_stop

# Marks a line holding a URL that must stay on a line of its own.
URL_MARKER = "#MatchedUrl#"

# Text should be wrapped at 70 characters for less capable email clients.
WRAP_WIDTH = 70


def _strip_orphan_full_stop(text: str) -> str:
    """Remove a full stop left alone on the last line of ``text``."""

    if text.endswith("\n. "):
        return text[:-3] + " "
    return text


def wrap_lines(
    text: str | None,
    width: int = WRAP_WIDTH,
    list_item_prefix: str = DEFAULT_CONFIG.list_item_prefix,
) -> str:
    """Wrap ``text`` so that no line reaches ``width`` characters.

    Every logical line is given terminal punctuation and split into words.
    An empty word is a paragraph break. Single line breaks are soft: the
    words of the next logical line continue the current output line. Lines
    starting with :data:`URL_MARKER` are never punctuated or wrapped; the
    URL is written on a line of its own.

    Args:
        text: Text to be wrapped.
        width: Column threshold a line must stay below.
        list_item_prefix: Prefix identifying list items, which end with a
            semicolon rather than a full stop.

    Returns:
        Wrapped text. Each word is followed by a single space.
    """

    if not text:
        return ""

    parts: list[str] = []
    column = 0

    for line in text.replace("\r", "").split("\n"):
        # Leave URLs on their own line no matter how long.
        if line.startswith(URL_MARKER):
            parts.append("\n" + line[len(URL_MARKER) :] + "\n")
            column = 0
            continue

        line = ensure_full_stop(line, list_item_prefix)

        for word in line.strip().split(" "):
            if not word:
                parts.append("\n\n")
                column = 0
                continue

            # A line must not start with a full stop, which happens when a
            # link ends a sentence.
            if word == ".":
                continue

            if column + len(word) + 1 >= width:
                parts.append("\n")
                column = 0

            parts.append(word + " ")
            column += len(word) + 1

    return _strip_orphan_full_stop("".join(parts))
