"""Configuration strings used when rendering TEN newsletters."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import define, evolve, field, fields

logger = logging.getLogger(__name__)

# Prefix of the environment variables that override configuration fields.
ENV_PREFIX = "TENLETTER_"

DEFAULT_FOOTER_LINES = (
    "This newsletter conforms to the Text Email Newsletter (TEN) standard",
    "developed by Headstar. For more information visit:",
    "http://www.headstar.com/ten/",
)


@define(frozen=True, slots=True)
class TenConfig:
    """Opaque strings consumed by the text pipeline and the renderer.

    Attributes:
        newsletter_prefix: Structural prefix placed before the newsletter
            title.
        section_prefix: Structural prefix placed before section headings and
            the contents heading.
        article_prefix: Structural prefix placed before article headings.
        article_number_separator: Text between an article number and its
            title.
        section_number_separator: Text between a section number and its
            title.
        section_label: Word used for sections, e.g. "Section".
        contents_label: Label of the contents listing.
        newsletter_label: Word used in the closing newsletter line.
        ends_suffix: Suffix used in closing lines such as "[Contents ends]".
        footer_lines: Lines stating conformance with the TEN standard.
        list_item_prefix: Bullet placed before list items in plain text.
        base_url: Prefix for links starting with "/".
        percent_substitute: Replacement for a literal percent sign.
        currency_template: ``re`` replacement template applied to pound
            amounts; groups are the symbol, the digits, the pence and an
            optional magnitude letter.
    """

    newsletter_prefix: str = "+++"
    section_prefix: str = "++"
    article_prefix: str = "+"
    article_number_separator: str = ": "
    section_number_separator: str = ": "
    section_label: str = "Section"
    contents_label: str = "Contents"
    newsletter_label: str = "Newsletter"
    ends_suffix: str = " ends"
    footer_lines: tuple[str, ...] = field(
        default=DEFAULT_FOOTER_LINES, converter=tuple
    )
    list_item_prefix: str = "- "
    base_url: str = ""
    percent_substitute: str = " per cent"
    currency_template: str = r"\g<2>\g<3>\g<4> pounds"


DEFAULT_CONFIG = TenConfig()


def _field_names() -> set[str]:
    """Return the names of all ``TenConfig`` fields."""

    return {attribute.name for attribute in fields(TenConfig)}


def _env_overrides() -> dict[str, str]:
    """Collect string fields overridden through ``TENLETTER_*`` variables."""

    overrides: dict[str, str] = {}
    for attribute in fields(TenConfig):
        if attribute.type not in ("str", str):
            continue
        value = os.environ.get(f"{ENV_PREFIX}{attribute.name.upper()}")
        if value is not None:
            overrides[attribute.name] = value
    return overrides


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read configuration values from a YAML file.

    Args:
        path: Location of the YAML file.

    Returns:
        Mapping of field names to values. Empty files yield an empty mapping.
    """

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: configuration must be a mapping")
    return data


def load_config(path: Path | None = None, **overrides: Any) -> TenConfig:
    """Build a configuration from a file, the environment and overrides.

    Later sources win: the YAML file is applied first, then ``TENLETTER_*``
    environment variables, then keyword ``overrides`` whose value is not
    ``None``.

    Args:
        path: Optional YAML file with configuration values.
        **overrides: Explicit field values.

    Returns:
        The resulting configuration.

    Throws:
        ValueError: If a file or override names an unknown field.
    """

    values: dict[str, Any] = {}
    if path is not None:
        values.update(_read_config_file(Path(path)))
    values.update(_env_overrides())
    values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(values) - _field_names())
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    logger.debug("Configuration overrides: %s", sorted(values))
    return evolve(DEFAULT_CONFIG, **values)
