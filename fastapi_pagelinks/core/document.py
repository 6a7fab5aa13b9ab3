"""Pagination document construction."""

from typing import Any

from fastapi_pagelinks.core.types import LinkDescriptor
from fastapi_pagelinks.pagination.base import LinkRendererBase


class PaginationDocumentBuilder:
    """Build plain-dict pagination documents for templates and JSON responses."""

    def build_link(self, descriptor: LinkDescriptor | None) -> dict[str, Any] | None:
        """Return the document form of a single link descriptor."""
        if descriptor is None:
            return None
        return {
            "page": descriptor.page,
            "gap": descriptor.is_gap,
            "url": descriptor.url,
            "current": descriptor.is_current,
            "label": descriptor.label,
        }

    def build(self, renderer: LinkRendererBase) -> dict[str, Any]:
        """Return the full pagination document for a renderer."""
        return {
            "links": [self.build_link(descriptor) for descriptor in renderer.render()],
            "previous": self.build_link(renderer.previous()),
            "next": self.build_link(renderer.next()),
            "meta": {
                "current_page": renderer.state.current_page,
                "total_pages": renderer.state.total_pages,
            },
        }
