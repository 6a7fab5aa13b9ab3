"""Windowed pagination links for FastAPI and Starlette views."""

from .config import PaginationSettings, get_settings
from .core.document import PaginationDocumentBuilder
from .core.errors import (
    InvalidPolicy,
    MissingCollectionError,
    PaginationError,
    URLResolutionError,
)
from .core.types import GAP, LinkDescriptor, PaginationState, WindowPolicy
from .core.window import compute_window
from .facade import PaginationFacade, get_pagination
from .pagination import LinkRenderer, PaginatedCollection, paginate
from .utils import merge_params

__all__ = [
    "GAP",
    "InvalidPolicy",
    "LinkDescriptor",
    "LinkRenderer",
    "MissingCollectionError",
    "PaginatedCollection",
    "PaginationDocumentBuilder",
    "PaginationError",
    "PaginationFacade",
    "PaginationSettings",
    "PaginationState",
    "URLResolutionError",
    "WindowPolicy",
    "compute_window",
    "get_pagination",
    "get_settings",
    "merge_params",
    "paginate",
]
