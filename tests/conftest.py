"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from attrs import fields

from tenletter.config import ENV_PREFIX, TenConfig


@pytest.fixture
def config() -> TenConfig:
    """Return a configuration with a base URL for relative links."""

    return TenConfig(base_url="https://example.org")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``TENLETTER_*`` variables of the host out of the tests."""

    for attribute in fields(TenConfig):
        monkeypatch.delenv(
            f"{ENV_PREFIX}{attribute.name.upper()}", raising=False
        )
    monkeypatch.delenv("TENLETTER_CONFIG", raising=False)
    monkeypatch.delenv("TENLETTER_LOG_FILE", raising=False)
