"""Link renderers and paginated collections."""

from .base import LinkRendererBase
from .collection import PaginatedCollection, paginate
from .renderer import LinkRenderer

__all__ = ["LinkRenderer", "LinkRendererBase", "PaginatedCollection", "paginate"]
