"""FastAPI application exposing the renderer."""

from __future__ import annotations

from fastapi import FastAPI  # type: ignore[import-not-found]

from .routes import filter as filter_route
from .routes import render as render_route

app = FastAPI(title="tenletter")
app.include_router(render_route.router)
app.include_router(filter_route.router)
