"""Text pipeline turning markup into TEN plain text."""

from .entities import expand_entities
from .markup import MARKUP_STEPS, filter_markup
from .numbering import format_number
from .punctuation import ensure_full_stop
from .wrap import URL_MARKER, WRAP_WIDTH, wrap_lines

__all__ = [
    "MARKUP_STEPS",
    "URL_MARKER",
    "WRAP_WIDTH",
    "ensure_full_stop",
    "expand_entities",
    "filter_markup",
    "format_number",
    "wrap_lines",
]
