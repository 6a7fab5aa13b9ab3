"""Windowed page-number computation."""

from __future__ import annotations

from fastapi_pagelinks.core.types import GAP, LinkToken, WindowPolicy


def compute_window(current: int, total: int, policy: WindowPolicy) -> list[LinkToken]:
    """Return the page numbers to link, with ``GAP`` where pages are elided.

    Pages ``1..outer_window`` and the last ``outer_window`` pages are always
    kept, together with ``inner_window`` pages on each side of ``current``.
    A single gap separates any two kept pages that are not adjacent.
    ``current`` is clamped into ``[1, total]`` for this computation only.
    """
    if total <= 0:
        return []

    outer = policy.outer_window
    inner = policy.inner_window
    current = max(1, min(current, total))

    pages = set(range(1, min(outer, total) + 1))
    pages.update(range(max(total - outer + 1, 1), total + 1))
    pages.update(range(max(current - inner, 1), min(current + inner, total) + 1))

    tokens: list[LinkToken] = []
    previous = None
    for page in sorted(pages):
        if previous is not None and page - previous > 1:
            tokens.append(GAP)
        tokens.append(page)
        previous = page
    return tokens
