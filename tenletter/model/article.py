"""Represents a single article of a newsletter."""

from __future__ import annotations

from typing import Any

from attrs import Converter, define, field

from ..config import DEFAULT_CONFIG, TenConfig
from ..text import ensure_full_stop, expand_entities, filter_markup


def _normalize_title(value: Any, article: Article) -> str:
    """Punctuate and expand an article title using the article config."""

    config = article.config
    title = ensure_full_stop(value, config.list_item_prefix)
    return expand_entities(title, config)


@define(slots=True)
class Article:
    """Represents a single article of a newsletter.

    Attributes:
        config: Configuration used to normalize the title and filter the
            body.
        title: Article title, punctuated and with special characters
            expanded whenever it is set.
        raw_text: Body of the article, which may contain markup. Articles
            with an empty body are left out of the newsletter.
    """

    config: TenConfig = field(
        default=DEFAULT_CONFIG, kw_only=True, repr=False, eq=False
    )
    title: str = field(
        default="", converter=Converter(_normalize_title, takes_self=True)
    )
    raw_text: str = field(default="", converter=lambda v: v or "")

    @property
    def filtered_text(self) -> str:
        """Return the body formatted according to the TEN standard."""

        return filter_markup(self.raw_text, self.config)
