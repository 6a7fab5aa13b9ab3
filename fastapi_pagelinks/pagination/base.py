"""Link renderer base class: tokens, descriptors and previous/next links."""

from __future__ import annotations

import logging

from fastapi_pagelinks.core.types import (
    GAP,
    LinkDescriptor,
    LinkToken,
    PaginationState,
    WindowPolicy,
)
from fastapi_pagelinks.core.window import compute_window

logger = logging.getLogger(__name__)

DEFAULT_PREVIOUS_LABEL = "← Previous"
DEFAULT_NEXT_LABEL = "Next →"
DEFAULT_GAP_LABEL = "…"


class LinkRendererBase:
    """Define the pagination link API; subclasses decide how URLs are built."""

    def __init__(
        self,
        state: PaginationState,
        policy: WindowPolicy,
        *,
        previous_label: str = DEFAULT_PREVIOUS_LABEL,
        next_label: str = DEFAULT_NEXT_LABEL,
        gap_label: str = DEFAULT_GAP_LABEL,
    ) -> None:
        self.state = state
        self.policy = policy
        self.previous_label = previous_label
        self.next_label = next_label
        self.gap_label = gap_label

    def url(self, page: int) -> str:
        """Return the URL of ``page``."""
        raise NotImplementedError

    def tokens(self) -> list[LinkToken]:
        """Return the windowed page numbers and gaps for the current state."""
        tokens = compute_window(self.state.current_page, self.state.total_pages, self.policy)
        logger.debug(
            "Pagination window for page %d of %d: %r",
            self.state.current_page,
            self.state.total_pages,
            tokens,
        )
        return tokens

    def descriptor(self, token: LinkToken) -> LinkDescriptor:
        """Resolve a single token; URL builder errors propagate from here."""
        if token is GAP:
            return LinkDescriptor(token=GAP, url=None, is_current=False, label=self.gap_label)
        return LinkDescriptor(
            token=token,
            url=self.url(token),
            is_current=token == self.state.current_page,
            label=str(token),
        )

    def render(self) -> list[LinkDescriptor]:
        """Return one descriptor per token, in order."""
        return [self.descriptor(token) for token in self.tokens()]

    def previous(self) -> LinkDescriptor | None:
        """Return the link to the preceding page, or None on the first page."""
        if not self.state.has_previous:
            return None
        page = self.state.current_page - 1
        return LinkDescriptor(token=page, url=self.url(page), label=self.previous_label)

    def next(self) -> LinkDescriptor | None:
        """Return the link to the following page, or None on the last page."""
        if not self.state.has_next:
            return None
        page = self.state.current_page + 1
        return LinkDescriptor(token=page, url=self.url(page), label=self.next_label)
