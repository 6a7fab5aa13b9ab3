"""SQLAlchemy helpers for pagination."""

from .pager import SQLAlchemyPager

__all__ = ["SQLAlchemyPager"]
