"""Paginated collections for in-memory sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence


@dataclass
class PaginatedCollection:
    """One page of items plus the numbers needed to render its links."""

    current_page: int
    per_page: int
    total_entries: int
    items: list[Any] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_entries / self.per_page) if self.per_page else 0

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.per_page

    @property
    def previous_page(self) -> int | None:
        return self.current_page - 1 if self.current_page > 1 else None

    @property
    def next_page(self) -> int | None:
        return self.current_page + 1 if self.current_page < self.total_pages else None

    @property
    def first_entry(self) -> int:
        return self.offset + 1 if self.items else 0

    @property
    def last_entry(self) -> int:
        return self.offset + len(self.items)

    @property
    def out_of_bounds(self) -> bool:
        return self.current_page > self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


def clamp_page(page: int, total_entries: int, per_page: int) -> int:
    """Clamp ``page`` into ``[1, max(total_pages, 1)]``."""
    total_pages = max(1, math.ceil(total_entries / per_page))
    return max(1, min(page, total_pages))


def paginate(items: Sequence[Any], page: int = 1, per_page: int = 30) -> PaginatedCollection:
    """Slice ``items`` down to ``page``, clamping the page into range."""
    per_page = max(1, per_page)
    total_entries = len(items)
    page = clamp_page(page, total_entries, per_page)
    offset = (page - 1) * per_page
    return PaginatedCollection(
        current_page=page,
        per_page=per_page,
        total_entries=total_entries,
        items=list(items[offset : offset + per_page]),
    )
