"""Render newsletters as plain text following the TEN standard."""

from .config import DEFAULT_CONFIG, TenConfig, load_config
from .loader import load_newsletter, newsletter_from_dict
from .model import Article, Newsletter, Section
from .render import number_articles, render_newsletter

__all__ = [
    "Article",
    "DEFAULT_CONFIG",
    "Newsletter",
    "Section",
    "TenConfig",
    "load_config",
    "load_newsletter",
    "newsletter_from_dict",
    "number_articles",
    "render_newsletter",
]
