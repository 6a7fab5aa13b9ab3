"""Shared test fixtures for fastapi_pagelinks."""

from __future__ import annotations

import pytest

from fastapi_pagelinks.config import PaginationSettings, get_settings
from fastapi_pagelinks.utils.query_params import build_nested_query


class RecordingURLBuilder:
    """URL builder that records every parameter mapping it resolves."""

    def __init__(self, path: str = "/items") -> None:
        self.path = path
        self.calls: list[dict] = []

    def __call__(self, params: dict) -> str:
        self.calls.append(params)
        query = build_nested_query(params)
        return f"{self.path}?{query}" if query else self.path


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    """Keep environment settings from leaking between tests."""
    for name in ("PAGELINKS_INNER_WINDOW", "PAGELINKS_OUTER_WINDOW", "PAGELINKS_PAGE_PARAM"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def url_builder() -> RecordingURLBuilder:
    return RecordingURLBuilder()


@pytest.fixture
def settings() -> PaginationSettings:
    return PaginationSettings(_env_file=None)
