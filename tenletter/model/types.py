"""Common type aliases for newsletter structures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .article import Article  # noqa: F401
    from .section import Section  # noqa: F401


ArticleList = list["Article"]
SectionList = list["Section"]
