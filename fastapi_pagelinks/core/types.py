"""Value types shared by the window calculator and link renderers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union

from fastapi_pagelinks.core.errors import InvalidPolicy


class Gap(enum.Enum):
    """Marker for an elided run of page numbers."""

    GAP = "gap"

    def __repr__(self) -> str:
        return "GAP"


GAP = Gap.GAP

LinkToken = Union[int, Gap]
QueryParams = dict[str, Any]


@dataclass(frozen=True)
class WindowPolicy:
    """How many page links surround the current page and anchor each end."""

    inner_window: int = 4
    outer_window: int = 1

    def __post_init__(self) -> None:
        for name in ("inner_window", "outer_window"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPolicy(f"{name} must be an integer, got {value!r}.")
            if value < 0:
                raise InvalidPolicy(f"{name} must be non-negative, got {value}.")


@dataclass(frozen=True)
class PaginationState:
    """Current page and page count for a single render."""

    current_page: int
    total_pages: int

    @classmethod
    def from_collection(cls, collection: Any) -> PaginationState:
        """Read ``current_page`` and ``total_pages`` off a paginated collection."""
        return cls(
            current_page=int(collection.current_page),
            total_pages=int(collection.total_pages),
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class LinkDescriptor:
    """A resolved pagination link, or a gap placeholder."""

    token: LinkToken
    url: str | None
    is_current: bool = False
    label: str = ""

    @property
    def is_gap(self) -> bool:
        return self.token is GAP

    @property
    def page(self) -> int | None:
        return None if self.is_gap else self.token
