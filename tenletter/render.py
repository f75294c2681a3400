"""Assemble a newsletter into a TEN plain text document."""

from __future__ import annotations

import logging

from .config import TenConfig
from .model import Article, Newsletter, Section
from .text import ensure_full_stop, filter_markup, format_number

logger = logging.getLogger(__name__)

NumberedArticles = list[tuple[int, Article]]
NumberedSections = list[tuple[int, Section, NumberedArticles]]


def number_articles(sections: list[Section]) -> NumberedSections:
    """Assign section and article numbers in document order.

    Article numbering continues across sections. Articles without body text
    are left out and do not use up a number.

    Args:
        sections: Ordered sections of a newsletter.

    Returns:
        For each section, its 1-based number, the section itself and the
        numbered articles it contains.
    """

    numbered: NumberedSections = []
    item_number = 1
    for section_number, section in enumerate(sections, start=1):
        articles: NumberedArticles = []
        for article in section.articles:
            if not article.raw_text:
                continue
            articles.append((item_number, article))
            item_number += 1
        numbered.append((section_number, section, articles))
    return numbered


def render_contents_entry(
    article: Article, item_number: int, config: TenConfig
) -> str:
    """Return the contents listing line for ``article``."""

    return (
        format_number(item_number)
        + config.article_number_separator
        + article.title
        + "\n"
    )


def render_article(
    article: Article, item_number: int, config: TenConfig
) -> str:
    """Return the heading and filtered body of ``article``.

    Args:
        article: Article to render.
        item_number: Number of the article in the newsletter.
        config: Configuration supplying the structural strings.

    Returns:
        The article text, or an empty string when the article has no body.
    """

    if not article.raw_text:
        return ""

    return (
        config.article_prefix
        + format_number(item_number)
        + config.article_number_separator
        + article.title
        + "\n\n"
        + article.filtered_text
        + "\n\n\n"
    )


def _section_heading(
    section: Section, section_number: int, config: TenConfig
) -> str:
    return (
        config.section_label
        + " "
        + format_number(section_number)
        + config.section_number_separator
        + ensure_full_stop(section.title, config.list_item_prefix)
    )


def render_contents(numbered: NumberedSections, config: TenConfig) -> str:
    """Return the contents listing for already numbered sections.

    Untitled sections contribute their articles without a heading.
    """

    parts = [
        config.section_prefix
        + ensure_full_stop(config.contents_label, config.list_item_prefix)
        + "\n"
    ]

    for section_number, section, articles in numbered:
        if section.title:
            parts.append(
                "\n" + _section_heading(section, section_number, config)
            )
            parts.append("\n\n")
        for item_number, article in articles:
            parts.append(render_contents_entry(article, item_number, config))

    parts.append(
        f"\n[{config.contents_label}{config.ends_suffix}].\n\n\n"
    )
    return "".join(parts)


def render_section(
    section: Section,
    section_number: int,
    articles: NumberedArticles,
    config: TenConfig,
) -> str:
    """Return a section with its heading, articles and closing line.

    Args:
        section: Section to render.
        section_number: Number of the section in the newsletter.
        articles: Numbered articles of the section, as produced by
            :func:`number_articles`.
        config: Configuration supplying the structural strings.

    Returns:
        Section text. Untitled sections have no heading or closing line.
    """

    parts: list[str] = []

    if section.title:
        parts.append(
            "\n"
            + config.section_prefix
            + _section_heading(section, section_number, config)
            + "\n\n\n"
        )

    for item_number, article in articles:
        parts.append(render_article(article, item_number, config))

    # The TEN standard closes each section with a footer.
    if section.title:
        label = config.section_label.lower()
        parts.append(
            f"[{section.title} {label}{config.ends_suffix}].\n\n"
        )

    return "".join(parts)


def render_newsletter(newsletter: Newsletter) -> str:
    """Return the complete newsletter formatted according to the TEN standard.

    Args:
        newsletter: Newsletter to render.

    Returns:
        Plain text ready to be placed in an email body.
    """

    config = newsletter.config
    sections = newsletter.sections
    parts: list[str] = []

    # A newsletter made of a single untitled section has no section
    # structure, so its title takes the section prefix.
    if (
        not newsletter.include_contents
        and len(sections) == 1
        and not sections[0].title
    ):
        parts.append(config.section_prefix)
    else:
        parts.append(config.newsletter_prefix)

    parts.append(ensure_full_stop(newsletter.title, config.list_item_prefix))
    if newsletter.strapline:
        parts.append(
            "\n\n"
            + ensure_full_stop(newsletter.strapline, config.list_item_prefix)
        )
    parts.append("\n\n\n")

    if sections:
        numbered = number_articles(sections)
        logger.debug(
            "Rendering %d sections with %d articles",
            len(numbered),
            sum(len(articles) for _, _, articles in numbered),
        )

        if newsletter.include_contents:
            parts.append(render_contents(numbered, config))

        if newsletter.introduction:
            parts.append(
                filter_markup(newsletter.introduction, config) + "\n\n\n"
            )

        for section_number, section, articles in numbered:
            parts.append(
                render_section(section, section_number, articles, config)
            )

    # Footer stating conformance with the TEN standard.
    parts.append("\n")
    for line in config.footer_lines:
        parts.append(line + "\n")
    parts.append(
        f"\n[{config.newsletter_label}{config.ends_suffix}].\n\n"
    )

    return "".join(parts)
