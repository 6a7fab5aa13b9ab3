"""Core pagination types, window computation and errors."""

from .errors import (
    InvalidPolicy,
    MissingCollectionError,
    PaginationError,
    PaginationErrorBuilder,
    URLResolutionError,
)
from .types import GAP, Gap, LinkDescriptor, LinkToken, PaginationState, WindowPolicy
from .window import compute_window

__all__ = [
    "GAP",
    "Gap",
    "InvalidPolicy",
    "LinkDescriptor",
    "LinkToken",
    "MissingCollectionError",
    "PaginationError",
    "PaginationErrorBuilder",
    "PaginationState",
    "URLResolutionError",
    "WindowPolicy",
    "compute_window",
]
