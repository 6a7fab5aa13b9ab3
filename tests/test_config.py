"""Tests for environment-driven pagination settings."""

from __future__ import annotations

import pytest

from fastapi_pagelinks.config import DEFAULT_PARAM_BLACKLIST, PaginationSettings, get_settings
from fastapi_pagelinks.core.errors import InvalidPolicy
from fastapi_pagelinks.core.types import WindowPolicy


class TestPaginationSettings:
    def test_defaults(self, settings):
        assert settings.policy() == WindowPolicy(inner_window=4, outer_window=1)
        assert settings.page_param == "page"
        assert settings.param_blacklist == set(DEFAULT_PARAM_BLACKLIST)
        assert settings.only_path is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PAGELINKS_INNER_WINDOW", "2")
        monkeypatch.setenv("PAGELINKS_OUTER_WINDOW", "0")
        monkeypatch.setenv("PAGELINKS_PAGE_PARAM", "page[number]")
        settings = PaginationSettings(_env_file=None)
        assert settings.policy() == WindowPolicy(inner_window=2, outer_window=0)
        assert settings.page_param == "page[number]"

    def test_negative_window_is_rejected(self):
        settings = PaginationSettings(_env_file=None, inner_window=-1)
        with pytest.raises(InvalidPolicy):
            settings.policy()

    def test_labels(self):
        settings = PaginationSettings(_env_file=None, gap_label="...")
        assert settings.labels()["gap_label"] == "..."
        assert set(settings.labels()) == {"previous_label", "next_label", "gap_label"}

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(None, 30), (0, 30), (-5, 30), (25, 25), (500, 100)],
    )
    def test_clamp_per_page(self, settings, requested, expected):
        assert settings.clamp_per_page(requested) == expected


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
