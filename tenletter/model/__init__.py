"""Containers describing a newsletter."""

from .article import Article
from .newsletter import Newsletter
from .section import Section

__all__ = ["Article", "Newsletter", "Section"]
