"""Filter a markup fragment into plain text."""

from __future__ import annotations

from fastapi import APIRouter  # type: ignore[import-not-found]
from fastapi.responses import (  # type: ignore[import-not-found]
    PlainTextResponse,
)
from pydantic import BaseModel, Field  # type: ignore[import-not-found]

from tenletter.text import WRAP_WIDTH, filter_markup

from ..utils import request_config

router = APIRouter()


class FilterRequest(BaseModel):
    """Input payload for the filter endpoint."""

    text: str
    base_url: str | None = None
    width: int = Field(default=WRAP_WIDTH, ge=2)


@router.post("/filter")
async def filter_endpoint(payload: FilterRequest) -> PlainTextResponse:
    """Return the fragment filtered and wrapped."""

    config = request_config(payload.base_url)
    return PlainTextResponse(
        filter_markup(payload.text, config, payload.width)
    )
