"""Pagination settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_pagelinks.core.types import WindowPolicy
from fastapi_pagelinks.pagination.base import (
    DEFAULT_GAP_LABEL,
    DEFAULT_NEXT_LABEL,
    DEFAULT_PREVIOUS_LABEL,
)

# Routing internals that must never be copied into pagination links.
DEFAULT_PARAM_BLACKLIST = frozenset({"script_name", "original_script_name", "root_path"})


class PaginationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAGELINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Window
    inner_window: int = Field(default=4, description="Pages shown on each side of the current page")
    outer_window: int = Field(default=1, description="Pages always shown at each end")

    # Parameters
    page_param: str = "page"
    per_page: int = 30
    max_per_page: int = 100
    param_blacklist: set[str] = Field(default_factory=lambda: set(DEFAULT_PARAM_BLACKLIST))
    only_path: bool = True

    # Labels
    previous_label: str = DEFAULT_PREVIOUS_LABEL
    next_label: str = DEFAULT_NEXT_LABEL
    gap_label: str = DEFAULT_GAP_LABEL

    def policy(self) -> WindowPolicy:
        """Return the window policy; raises InvalidPolicy for negative sizes."""
        return WindowPolicy(inner_window=self.inner_window, outer_window=self.outer_window)

    def labels(self) -> dict[str, str]:
        return {
            "previous_label": self.previous_label,
            "next_label": self.next_label,
            "gap_label": self.gap_label,
        }

    def clamp_per_page(self, per_page: int | None) -> int:
        if per_page is None or per_page < 1:
            return self.per_page
        return min(per_page, self.max_per_page)


@lru_cache
def get_settings() -> PaginationSettings:
    return PaginationSettings()
