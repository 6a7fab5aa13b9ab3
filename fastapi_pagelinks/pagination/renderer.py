"""Link renderer that resolves URLs from merged query parameters."""

from __future__ import annotations

from functools import cached_property
from typing import Any, Callable, Iterable, Mapping

from fastapi_pagelinks.core.types import PaginationState, QueryParams, WindowPolicy
from fastapi_pagelinks.pagination.base import LinkRendererBase
from fastapi_pagelinks.utils.query_params import add_page_param, merge_params, normalize_params

URLBuilder = Callable[[QueryParams], str]


class LinkRenderer(LinkRendererBase):
    """Build page URLs by merging request parameters with a page override.

    ``url_builder`` receives the merged parameters for each page link and
    returns its URL. Whatever it raises is left to the caller.
    """

    def __init__(
        self,
        state: PaginationState,
        policy: WindowPolicy,
        *,
        base_params: Mapping[Any, Any] | None,
        url_builder: URLBuilder,
        page_param: str = "page",
        blacklist: Iterable[Any] = (),
        params: Mapping[Any, Any] | None = None,
        **labels: str,
    ) -> None:
        super().__init__(state, policy, **labels)
        self.base_params = base_params or {}
        self.url_builder = url_builder
        self.page_param = page_param
        self.blacklist = frozenset(blacklist)
        self.params = params

    @cached_property
    def base_url_params(self) -> QueryParams:
        """Request parameters plus extra ``params``, blacklist applied."""
        return merge_params(self.base_params, self.params, self.blacklist)

    def url_params(self, page: int) -> QueryParams:
        """Return the full parameter mapping for ``page``."""
        url_params = normalize_params(self.base_url_params)
        return add_page_param(url_params, self.page_param, page)

    def url(self, page: int) -> str:
        return self.url_builder(self.url_params(page))
