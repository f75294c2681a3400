"""Convert special characters into text-based equivalents."""

from __future__ import annotations

import html
import re

from ..config import DEFAULT_CONFIG, TenConfig

# Pound symbol or entity, digits with thousands separators, optional pence
# and an optional magnitude letter such as "m" in "£5m".
CURRENCY_RE = re.compile(
    r"(£|&#163;|&pound;)([0-9,]+)(\.[0-9][0-9]?)?([a-z]?)"
)

# Typographic entities with a plain ASCII equivalent.
TYPOGRAPHIC_ENTITIES = (
    ("&#8211;", "-"),
    ("&ndash;", "-"),
    ("&#8216;", "'"),
    ("&lsquo;", "'"),
    ("&#8217;", "'"),
    ("&rsquo;", "'"),
    ("&#8230;", "..."),
    ("&hellip;", "..."),
)


def expand_entities(text: str | None, config: TenConfig | None = None) -> str:
    """Expand special characters and entities into plain text.

    The substitutions run in a fixed order so that later rules never match
    the output of earlier ones: the percent sign is replaced first, then
    currency amounts, then typographic entities, and finally every other
    entity is decoded.

    Args:
        text: Text which may contain special characters.
        config: Configuration providing the substitution strings.

    Returns:
        Text with special characters converted.
    """

    if not text:
        return ""
    config = config or DEFAULT_CONFIG

    text = text.replace("%", config.percent_substitute)
    text = CURRENCY_RE.sub(config.currency_template, text)
    for entity, replacement in TYPOGRAPHIC_ENTITIES:
        text = text.replace(entity, replacement)

    # Resolve any other entities.
    text = html.unescape(text)
    return text.replace("\xa0", " ")
