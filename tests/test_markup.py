"""Tests for the markup filter."""

from tenletter.config import DEFAULT_CONFIG, TenConfig
from tenletter.text import URL_MARKER, filter_markup
from tenletter.text.markup import (
    MARKUP_STEPS,
    convert_list_items,
    double_line_breaks,
    expand_links,
    expand_special_characters,
    separate_list_paragraphs,
    strip_list_containers,
    strip_tags,
    unwrap_abbreviations,
    unwrap_emphasis,
)


def test_relative_link_expanded(config: TenConfig) -> None:
    """Relative links are prefixed with the base URL."""

    text = 'Visit <a href="/about">our page</a> for details'
    assert filter_markup(text, config) == (
        "Visit our page. \nhttps://example.org/about\nfor details. "
    )


def test_base_url_trailing_slash(config: TenConfig) -> None:
    """A trailing slash on the base URL is dropped."""

    config = TenConfig(base_url="https://example.org/")
    result = expand_links('<a href="/x">x</a>', config)
    assert result == f"x\n{URL_MARKER}https://example.org/x\n"


def test_link_with_extra_attributes(config: TenConfig) -> None:
    """Attributes after href do not stop link expansion."""

    text = '<a href="http://a.org/p?q=1" title="A page">page</a>'
    assert expand_links(text, config) == (
        f"page\n{URL_MARKER}http://a.org/p?q=1\n"
    )


def test_mailto_keeps_only_text(config: TenConfig) -> None:
    """E-mail links keep only their text."""

    text = 'Email <a href="MAILTO:news@example.org">us</a> now'
    assert expand_links(text, config) == "Email us now"
    assert filter_markup(text, config) == "Email us now. "


def test_href_starting_with_letter_is_not_a_link(config: TenConfig) -> None:
    """An unquoted href starting with a letter is not expanded."""

    text = "<a href=Http://example.org>x</a>"
    assert expand_links(text, config) == text
    assert filter_markup(text, config) == "x. "


def test_link_ending_sentence(config: TenConfig) -> None:
    """A full stop after a link does not start a new line."""

    text = 'Read <a href="http://x.org">this</a>.'
    assert filter_markup(text, config) == "Read this. \nhttp://x.org\n"


def test_unwrap_abbreviations() -> None:
    """Acronym and abbreviation tags are replaced by their contents."""

    text = (
        '<acronym title="World Health Organisation">WHO</acronym> and '
        "<ABBR>etc</ABBR>"
    )
    assert unwrap_abbreviations(text, DEFAULT_CONFIG) == "WHO and etc"


def test_unwrap_emphasis() -> None:
    """Emphasis tags are replaced by their contents."""

    text = "<strong>Bold</strong> and <EM>it</EM>"
    assert unwrap_emphasis(text, DEFAULT_CONFIG) == "Bold and it"


def test_double_line_breaks() -> None:
    """Line breaks are normalised and doubled."""

    assert double_line_breaks("a\r\nb\nc", DEFAULT_CONFIG) == "a\n\nb\n\nc"


def test_strip_list_containers() -> None:
    """List containers are removed."""

    text = "<ul>\n  <li>x</li></UL>"
    assert strip_list_containers(text, DEFAULT_CONFIG) == "<li>x</li>"


def test_separate_list_paragraphs() -> None:
    """A paragraph after a list item becomes a paragraph break."""

    text = "<li>a</li><p>b"
    assert separate_list_paragraphs(text, DEFAULT_CONFIG) == "<li>a\n\nb"


def test_convert_list_items() -> None:
    """List items get the configured prefix."""

    text = '<li>a</li><li class="x">b</li>'
    assert convert_list_items(text, DEFAULT_CONFIG) == "- a</li>- b</li>"


def test_strip_tags() -> None:
    """Remaining tags are removed."""

    text = '<p class="x">Hi<br/> there</p><h2>T</h2>'
    assert strip_tags(text, DEFAULT_CONFIG) == "Hi thereT"


def test_special_characters_left_alone_in_urls() -> None:
    """URL lines only have their entities decoded."""

    text = f"50%\n{URL_MARKER}http://x.org/?q=50%25&amp;a=1"
    assert expand_special_characters(text, DEFAULT_CONFIG) == (
        f"50 per cent\n{URL_MARKER}http://x.org/?q=50%25&a=1"
    )


def test_list_rendered_as_items() -> None:
    """Lists are rendered as prefixed items ending in semicolons."""

    text = "<p>Items:</p>\n<ul>\n<li>one</li>\n<li>two</li>\n</ul>"
    assert filter_markup(text) == "Items: \n\n- one; \n\n- two; \n\n\n\n"


def test_entities_expanded() -> None:
    """Currency and entities are expanded before wrapping."""

    assert filter_markup("Costs &#163;5 &amp; rising") == (
        "Costs 5 pounds & rising. "
    )


def test_steps_can_be_replaced() -> None:
    """A custom step sequence replaces the default one."""

    assert filter_markup("<b>x</b>", steps=()) == "<b>x</b>. "


def test_tag_stripper_runs_after_specific_rules() -> None:
    """The tag stripper runs after the rules matching specific tags."""

    position = MARKUP_STEPS.index(strip_tags)
    for step in (unwrap_abbreviations, expand_links, convert_list_items):
        assert MARKUP_STEPS.index(step) < position


def test_empty_input() -> None:
    """Empty input yields empty output."""

    assert filter_markup(None) == ""
    assert filter_markup("") == ""
