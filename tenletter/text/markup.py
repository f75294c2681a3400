"""Convert inline markup into plain text laid out for the TEN standard."""

from __future__ import annotations

import html
import re
from typing import Callable

from ..config import DEFAULT_CONFIG, TenConfig
from .entities import expand_entities
from .wrap import URL_MARKER, WRAP_WIDTH, wrap_lines

MarkupStep = Callable[[str, TenConfig], str]

ACRONYM_RE = re.compile(
    r"<acronym(?:\s[^>]+)?>([^>]+)</acronym>", re.IGNORECASE
)
ABBR_RE = re.compile(r"<abbr(?:\s[^>]+)?>([^>]+)</abbr>", re.IGNORECASE)
STRONG_RE = re.compile(r"<strong>([^>]+)</strong>", re.IGNORECASE)
EM_RE = re.compile(r"<em>([^>]+)</em>", re.IGNORECASE)

# The character after "href=" is usually a quote. Because matching ignores
# case, it may not be a letter of either case.
LINK_RE = re.compile(
    r"<a\shref=[^A-Z](?P<url>[A-Za-z0-9:/?&.;%~=@#-_ ]+)[^A-Z]"
    r"(?:\s[^>]+)?>(?P<text>[^<]+)</a>",
    re.IGNORECASE,
)
MAILTO_RE = re.compile(r"mailto:", re.IGNORECASE)

LIST_CONTAINER_RE = re.compile(r"</?(?:u|o)l>\s*", re.IGNORECASE)
LIST_ITEM_RE = re.compile(r"<li(?:\s[^>]+)?>", re.IGNORECASE)
TAG_RE = re.compile(r"</?[a-z][a-z0-9]*(?:\s[^>]+)?/?>", re.IGNORECASE)


def unwrap_abbreviations(text: str, config: TenConfig) -> str:
    """Replace acronyms and abbreviations with their text.

    These tags are likely to be found within a link, where they would stop
    the link pattern from matching.
    """

    text = ACRONYM_RE.sub(r"\1", text)
    return ABBR_RE.sub(r"\1", text)


def unwrap_emphasis(text: str, config: TenConfig) -> str:
    """Replace ``strong`` and ``em`` elements with their text."""

    text = STRONG_RE.sub(r"\1", text)
    return EM_RE.sub(r"\1", text)


def double_line_breaks(text: str, config: TenConfig) -> str:
    """Turn every line break into a paragraph break.

    The wrapper treats single line breaks as soft, so breaks present in the
    markup are doubled to survive wrapping.
    """

    return text.replace("\r\n", "\n").replace("\n", "\n\n")


def _convert_link(match: re.Match[str], config: TenConfig) -> str:
    """Return the link text followed by a marked URL line."""

    url = match.group("url").strip()
    link_text = match.group("text")

    # Add the domain to internal URLs.
    if url.startswith("/"):
        url = config.base_url.rstrip("/") + url

    if MAILTO_RE.match(url):
        return link_text
    return f"{link_text}\n{URL_MARKER}{url}\n"


def expand_links(text: str, config: TenConfig) -> str:
    """Write each link as its text followed by the URL on its own line."""

    return LINK_RE.sub(lambda match: _convert_link(match, config), text)


def strip_list_containers(text: str, config: TenConfig) -> str:
    """Remove list container tags and the whitespace following them."""

    return LIST_CONTAINER_RE.sub("", text)


def separate_list_paragraphs(text: str, config: TenConfig) -> str:
    """Break a paragraph following a list item onto a new paragraph.

    Once container whitespace is gone the closing item tag and the opening
    paragraph tag sit next to each other.
    """

    return text.replace("</li><p>", "\n\n")


def convert_list_items(text: str, config: TenConfig) -> str:
    """Replace list item tags with the plain text bullet."""

    return LIST_ITEM_RE.sub(lambda _: config.list_item_prefix, text)


def strip_tags(text: str, config: TenConfig) -> str:
    """Remove all remaining tags."""

    return TAG_RE.sub("", text)


def expand_special_characters(text: str, config: TenConfig) -> str:
    """Expand special characters outside URL lines.

    URLs only have their entities decoded so that a percent sign or a pound
    sign inside a query string survives.
    """

    lines = []
    for line in text.split("\n"):
        if line.startswith(URL_MARKER):
            lines.append(html.unescape(line))
        else:
            lines.append(expand_entities(line, config))
    return "\n".join(lines)


# Order matters: the tag stripper must run after every specific rule.
MARKUP_STEPS: tuple[MarkupStep, ...] = (
    unwrap_abbreviations,
    unwrap_emphasis,
    double_line_breaks,
    expand_links,
    strip_list_containers,
    separate_list_paragraphs,
    convert_list_items,
    strip_tags,
    expand_special_characters,
)


def filter_markup(
    text: str | None,
    config: TenConfig | None = None,
    width: int = WRAP_WIDTH,
    steps: tuple[MarkupStep, ...] = MARKUP_STEPS,
) -> str:
    """Convert markup into wrapped plain text.

    Args:
        text: Markup such as an article body.
        config: Configuration supplying the list prefix, base URL and
            substitution strings.
        width: Column threshold passed to :func:`wrap_lines`.
        steps: Rewrite passes applied in order before wrapping.

    Returns:
        Plain text formatted according to the TEN standard.
    """

    if not text:
        return ""
    config = config or DEFAULT_CONFIG

    for step in steps:
        text = step(text, config)

    return wrap_lines(text, width, config.list_item_prefix)
