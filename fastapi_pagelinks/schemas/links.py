"""Pydantic schemas for pagination documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class PaginationLink(BaseModel):
    """A page link, or a gap when ``gap`` is true."""

    page: Optional[int] = None
    gap: bool = False
    url: Optional[str] = None
    current: bool = False
    label: str = ""


class PaginationMeta(BaseModel):
    """Page position of the rendered collection."""

    current_page: int
    total_pages: int


class PaginationLinksDocument(BaseModel):
    """Top-level pagination document."""

    links: List[PaginationLink]
    previous: Optional[PaginationLink] = None
    next: Optional[PaginationLink] = None
    meta: PaginationMeta


class PaginationErrorDocument(BaseModel):
    """Top-level error document."""

    errors: List[Dict[str, Any]]
