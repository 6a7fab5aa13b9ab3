"""Pydantic schemas for pagination documents."""

from .links import (
    PaginationErrorDocument,
    PaginationLink,
    PaginationLinksDocument,
    PaginationMeta,
)

__all__ = [
    "PaginationErrorDocument",
    "PaginationLink",
    "PaginationLinksDocument",
    "PaginationMeta",
]
