"""Query parameter merging and nested query-string helpers."""

from .query_params import (
    add_page_param,
    build_nested_query,
    get_param,
    merge_params,
    parse_nested_query,
)

__all__ = [
    "add_page_param",
    "build_nested_query",
    "get_param",
    "merge_params",
    "parse_nested_query",
]
