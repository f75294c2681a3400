"""Render a newsletter posted as JSON."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException  # type: ignore[import-not-found]
from fastapi.responses import (  # type: ignore[import-not-found]
    PlainTextResponse,
)
from pydantic import BaseModel, Field  # type: ignore[import-not-found]

from tenletter.loader import newsletter_from_dict
from tenletter.render import render_newsletter

from ..utils import request_config

router = APIRouter()


class ArticlePayload(BaseModel):
    """Article of a posted newsletter.

    Attributes:
        title: Article title.
        text: Article body, which may contain markup.
    """

    title: str = ""
    text: str = ""


class SectionPayload(BaseModel):
    """Section of a posted newsletter."""

    title: str = ""
    articles: list[ArticlePayload] = Field(default_factory=list)


class RenderRequest(BaseModel):
    """Input payload for the render endpoint.

    Attributes:
        title: Newsletter title.
        strapline: Optional strapline.
        introduction: Optional introduction markup.
        include_contents: Whether to generate a contents listing.
        sections: Ordered sections.
        base_url: Prefix for links starting with "/"; the configured value
            is used when omitted.
    """

    title: str = ""
    strapline: str = ""
    introduction: str = ""
    include_contents: bool = True
    sections: list[SectionPayload] = Field(default_factory=list)
    base_url: str | None = None


@router.post("/render")
async def render_endpoint(payload: RenderRequest) -> PlainTextResponse:
    """Return the posted newsletter as TEN plain text."""

    config = request_config(payload.base_url)
    data = payload.model_dump(exclude={"base_url"})

    try:
        newsletter = newsletter_from_dict(data, config)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return PlainTextResponse(render_newsletter(newsletter))
