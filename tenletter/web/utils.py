"""Utility helpers for web routes."""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import HTTPException  # type: ignore[import-not-found]

from tenletter.config import TenConfig, load_config

# Environment variable naming an optional YAML file with configuration
# strings for the web application.
CONFIG_FILE_ENV = "TENLETTER_CONFIG"


def request_config(base_url: str | None = None) -> TenConfig:
    """Return the configuration used to serve a request.

    The environment is read on every call, so changes to it apply to the
    next request.

    Args:
        base_url: Base URL supplied with the request, overriding the
            configured one.

    Returns:
        Configuration built from ``TENLETTER_CONFIG`` and the environment.
    """

    config_file = os.environ.get(CONFIG_FILE_ENV)
    path = Path(config_file) if config_file else None
    try:
        return load_config(path, base_url=base_url)
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
