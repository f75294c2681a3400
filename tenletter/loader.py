"""Load newsletters from JSON or YAML files."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .config import DEFAULT_CONFIG, TenConfig
from .model import Article, Newsletter, Section

logger = logging.getLogger(__name__)

JSONDict = dict[str, Any]


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)


def _require_mapping(value: object, where: str) -> JSONDict:
    if not isinstance(value, dict):
        raise ValueError(f"{where} must be a mapping")
    return value


def _require_list(value: object, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where} must be a list")
    return value


def _text(data: JSONDict, key: str, where: str) -> str:
    """Return the string stored under ``key``, defaulting to empty."""

    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, (str, int, float)):
        raise ValueError(f"{where}.{key} must be text")
    return str(value)


def newsletter_from_dict(
    data: object, config: TenConfig | None = None
) -> Newsletter:
    """Build a newsletter from a mapping.

    The mapping holds ``title``, ``strapline``, ``introduction``,
    ``include_contents`` and a list of ``sections``; each section holds a
    ``title`` and a list of ``articles`` with ``title`` and ``text``.

    Args:
        data: Parsed newsletter structure.
        config: Configuration attached to the newsletter and its articles.

    Returns:
        The newsletter model.

    Throws:
        ValueError: If the structure does not match the expected layout.
    """

    config = config or DEFAULT_CONFIG
    root = _require_mapping(data, "newsletter")

    sections: list[Section] = []
    raw_sections = _require_list(root.get("sections"), "sections")
    for s_idx, raw_section in enumerate(raw_sections):
        where = f"sections[{s_idx}]"
        section_data = _require_mapping(raw_section, where)

        articles: list[Article] = []
        raw_articles = _require_list(
            section_data.get("articles"), f"{where}.articles"
        )
        for a_idx, raw_article in enumerate(raw_articles):
            a_where = f"{where}.articles[{a_idx}]"
            article_data = _require_mapping(raw_article, a_where)
            articles.append(
                Article(
                    _text(article_data, "title", a_where),
                    _text(article_data, "text", a_where),
                    config=config,
                )
            )

        sections.append(
            Section(_text(section_data, "title", where), articles)
        )

    include_contents = root.get("include_contents", True)
    if not isinstance(include_contents, bool):
        raise ValueError("include_contents must be true or false")

    return Newsletter(
        title=_text(root, "title", "newsletter"),
        strapline=_text(root, "strapline", "newsletter"),
        introduction=_text(root, "introduction", "newsletter"),
        include_contents=include_contents,
        sections=sections,
        config=config,
    )


def load_newsletter(path: Path, config: TenConfig | None = None) -> Newsletter:
    """Load a newsletter from a JSON or YAML file.

    Args:
        path: Location of the file. ``.json`` files are decoded as JSON,
            anything else as YAML.
        config: Configuration attached to the newsletter.

    Returns:
        The newsletter model.
    """

    path = Path(path)
    text = path.read_text(encoding="utf-8")

    # Decode according to file extension.
    try:
        if path.suffix == ".json":
            data = json_loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ValueError(f"{path}: cannot parse newsletter: {exc}") from exc

    logger.debug("Loaded newsletter file %s", path)
    return newsletter_from_dict(data, config)
