"""Tests for the newsletter containers."""

from tenletter.config import TenConfig
from tenletter.model import Article, Newsletter, Section


def test_article_title_normalized_on_init() -> None:
    """The article title is punctuated when created."""

    assert Article("Hello world").title == "Hello world."


def test_article_title_normalized_on_assignment() -> None:
    """The article title is punctuated when reassigned."""

    article = Article()
    article.title = "Caf&eacute; news"
    assert article.title == "Café news."
    article.title = "- item"
    assert article.title == "- item;"


def test_article_title_uses_article_config() -> None:
    """Title normalisation uses the article configuration."""

    config = TenConfig(list_item_prefix="* ")
    assert Article("* point", config=config).title == "* point;"


def test_filtered_text_recomputed() -> None:
    """The filtered text follows changes to the raw text."""

    article = Article("Title", "First")
    assert article.filtered_text == "First. "
    article.raw_text = "Second"
    assert article.filtered_text == "Second. "


def test_filtered_text_uses_base_url(config: TenConfig) -> None:
    """The filtered text expands relative links."""

    article = Article("T", '<a href="/x">x</a>', config=config)
    assert "https://example.org/x" in article.filtered_text


def test_defaults() -> None:
    """Models start empty with the default configuration."""

    newsletter = Newsletter()
    assert newsletter.include_contents is True
    assert newsletter.sections == []
    assert Section().title == ""
    assert Section(None).title == ""
