"""Request-facing entry point that wires Starlette requests to link renderers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from fastapi import Request
from starlette.routing import NoMatchFound

from fastapi_pagelinks.config import PaginationSettings, get_settings
from fastapi_pagelinks.core.document import PaginationDocumentBuilder
from fastapi_pagelinks.core.errors import MissingCollectionError, URLResolutionError
from fastapi_pagelinks.core.types import PaginationState, QueryParams
from fastapi_pagelinks.pagination.collection import PaginatedCollection, paginate
from fastapi_pagelinks.pagination.renderer import LinkRenderer
from fastapi_pagelinks.utils.query_params import (
    build_nested_query,
    get_param,
    parse_nested_query,
)

logger = logging.getLogger(__name__)


class PaginationFacade:
    """Extract pagination state from a request and render its links.

    Only GET requests contribute their query string to generated links.
    Links point at the current path unless ``route_name`` names another
    route, in which case ``request.url_for`` resolves it with
    ``path_params``.
    """

    document_builder_class: type = PaginationDocumentBuilder

    def __init__(
        self,
        request: Request,
        *,
        settings: PaginationSettings | None = None,
        params: Mapping[str, Any] | None = None,
        route_name: str | None = None,
        path_params: Mapping[str, Any] | None = None,
        url_builder: Callable[[QueryParams], str] | None = None,
    ) -> None:
        self.request = request
        self.settings = settings or get_settings()
        self.params = params
        self.route_name = route_name
        self.path_params = dict(path_params or {})
        self.url_builder = url_builder or self.build_url

    def query_params(self) -> QueryParams:
        return parse_nested_query(self.request.url.query)

    def base_params(self) -> QueryParams:
        """Return the request parameters that links should carry over."""
        if self.request.method != "GET":
            return {}
        return self.query_params()

    def current_page(self) -> int:
        """Return the requested page number, or 1 when absent or malformed."""
        value = get_param(self.query_params(), self.settings.page_param)
        if isinstance(value, list):
            value = value[-1] if value else None
        try:
            page = int(value)
        except (TypeError, ValueError):
            return 1
        return max(page, 1)

    def paginate(self, items: Sequence[Any], per_page: int | None = None) -> PaginatedCollection:
        """Slice ``items`` to the requested page."""
        return paginate(items, self.current_page(), self.settings.clamp_per_page(per_page))

    def build_url(self, params: Mapping[str, Any]) -> str:
        """Resolve merged parameters to a URL on the current (or named) route."""
        if self.route_name:
            try:
                url = self.request.url_for(self.route_name, **self.path_params)
            except NoMatchFound as exc:
                raise URLResolutionError(
                    f"No route named {self.route_name!r} matches {self.path_params!r}."
                ) from exc
        else:
            url = self.request.url
        query = build_nested_query(params)
        if self.settings.only_path:
            return f"{url.path}?{query}" if query else url.path
        return str(url.replace(query=query))

    def collection_name(self) -> str | None:
        """Return the collection name implied by the matched route path."""
        route = self.request.scope.get("route")
        path = getattr(route, "path", None) or self.request.url.path
        segments = [
            segment
            for segment in path.split("/")
            if segment and not segment.startswith("{")
        ]
        if not segments:
            return None
        return segments[-1].replace("-", "_")

    def infer_collection(self, context: Mapping[str, Any] | None = None) -> Any:
        """Find the collection in ``context`` or on ``request.state``."""
        name = self.collection_name()
        if name is None:
            raise MissingCollectionError(
                "Cannot infer a collection name from the request path. "
                "Pass the collection object explicitly."
            )
        collection = (context or {}).get(name)
        if collection is None:
            collection = getattr(self.request.state, name, None)
        if collection is None:
            raise MissingCollectionError(
                f"The {name!r} collection appears to be empty. "
                "Did you forget to pass the collection object?"
            )
        return collection

    def state_for(self, collection: Any) -> PaginationState:
        """Return the clamped pagination state of ``collection``."""
        state = PaginationState.from_collection(collection)
        current_page = max(1, min(state.current_page, max(state.total_pages, 1)))
        return PaginationState(current_page=current_page, total_pages=state.total_pages)

    def renderer(self, collection: Any) -> LinkRenderer:
        """Return a link renderer for ``collection`` on this request."""
        return LinkRenderer(
            self.state_for(collection),
            self.settings.policy(),
            base_params=self.base_params(),
            url_builder=self.url_builder,
            page_param=self.settings.page_param,
            blacklist=self.settings.param_blacklist,
            params=self.params,
            **self.settings.labels(),
        )

    def render(
        self,
        collection: Any | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Return the pagination document, or None when there is one page or less."""
        if collection is None:
            collection = self.infer_collection(context)
        renderer = self.renderer(collection)
        if renderer.state.total_pages <= 1:
            logger.debug("Skipping pagination for %s: single page", self.request.url.path)
            return None
        return self.document_builder_class().build(renderer)

    def page_entries_info(
        self,
        collection: Any | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> dict[str, int]:
        """Return the entry range shown on the current page."""
        if collection is None:
            collection = self.infer_collection(context)
        return {
            "first": collection.first_entry,
            "last": collection.last_entry,
            "total_entries": collection.total_entries,
            "total_pages": collection.total_pages,
        }


def get_pagination(request: Request) -> PaginationFacade:
    """FastAPI dependency returning a facade for the current request."""
    return PaginationFacade(request, settings=get_settings())
