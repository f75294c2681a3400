"""Section grouping articles of a newsletter."""

from __future__ import annotations

from attrs import define, field

from .types import ArticleList


@define(slots=True)
class Section:
    """Section grouping articles of a newsletter.

    Attributes:
        title: Section title. An empty title renders the articles without a
            section heading or footer.
        articles: Ordered articles within the section.
    """

    title: str = field(default="", converter=lambda v: v or "")
    articles: ArticleList = field(factory=list, repr=False)
