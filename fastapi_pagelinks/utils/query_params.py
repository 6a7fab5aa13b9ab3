"""Helpers for merging, parsing and encoding pagination query parameters."""

from __future__ import annotations

import enum
import re
from typing import Any, Iterable, Iterator, Mapping
from urllib.parse import parse_qsl, urlencode

# Page keys made only of word characters and dashes are set flat; anything
# else (``page[number]``, ``page.number``) goes through the nested form.
_FLAT_KEY = re.compile(r"^[\w-]+$")
_BRACKETED_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")
_KEY_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


def normalize_key(key: Any) -> str:
    """Return the canonical (``str``) form of a parameter key."""
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return normalize_key(key.value)
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_params(value)
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    return value


def normalize_params(params: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Copy the dicts and lists of ``params`` with every mapping key normalized.

    Other values are shared with ``params``, not copied.
    """
    if not params:
        return {}
    return {normalize_key(key): _copy_value(value) for key, value in params.items()}


def deep_update(
    target: dict[str, Any],
    other: Mapping[Any, Any],
    blacklist: Iterable[Any] = (),
) -> dict[str, Any]:
    """Merge ``other`` into ``target`` in place and return ``target``.

    Mapping values merge recursively into an existing mapping (or a new one);
    any other value overwrites. Keys in ``blacklist`` are skipped at the top
    level only.
    """
    blocked = {normalize_key(key) for key in blacklist}
    for raw_key, value in other.items():
        key = normalize_key(raw_key)
        if key in blocked:
            continue
        existing = target.get(key)
        if isinstance(value, Mapping) and (existing is None or isinstance(existing, dict)):
            if existing is None:
                existing = target[key] = {}
            deep_update(existing, value)
        else:
            target[key] = _copy_value(value)
    return target


def merge_params(
    base: Mapping[Any, Any] | None,
    override: Mapping[Any, Any] | None = None,
    blacklist: Iterable[Any] = (),
) -> dict[str, Any]:
    """Merge ``override`` over ``base`` without mutating either.

    Blacklisted keys are dropped from both sides, so they never reach the
    result.
    """
    blocked = {normalize_key(key) for key in blacklist}
    merged = {
        key: value for key, value in normalize_params(base).items() if key not in blocked
    }
    if override:
        deep_update(merged, override, blocked)
    return merged


def split_param_key(key: str) -> list[str]:
    """Split a bracketed parameter key into its path segments.

    ``"page[number]"`` gives ``["page", "number"]``. A trailing ``[]`` stays
    on the last segment (``"filter[tags][]"`` gives ``["filter", "tags[]"]``).
    Keys that do not follow the bracket convention come back whole.
    """
    match = _BRACKETED_KEY.match(key)
    if not match:
        return [key]
    segments = [match.group(1), *_KEY_SEGMENT.findall(match.group(2))]
    if segments[-1] == "":
        segments.pop()
        segments[-1] += "[]"
    if "" in segments:
        return [key]
    return segments


def is_flat_key(key: str) -> bool:
    return bool(_FLAT_KEY.match(key))


def nest_param(key: str, value: Any) -> dict[str, Any]:
    """Return ``{key: value}`` expanded along the key's bracket path."""
    segments = split_param_key(key)
    nested: Any = value
    for segment in reversed(segments[1:]):
        nested = {segment: nested}
    return {segments[0]: nested}


def get_param(params: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Read a value back through a (possibly bracketed) key."""
    if key in params:
        return params[key]
    current: Any = params
    for segment in split_param_key(key):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current


def add_page_param(params: dict[str, Any], key: str, page: Any) -> dict[str, Any]:
    """Set the page parameter on ``params`` in place, ignoring any blacklist."""
    if is_flat_key(key):
        params[key] = page
        return params
    # The structured form wins over a literal flat copy of the same key.
    params.pop(key, None)
    return deep_update(params, nest_param(key, page))


def parse_nested_query(query: str) -> dict[str, Any]:
    """Parse a query string into nested parameters.

    Bracketed keys nest (``page[size]=10`` gives ``{"page": {"size": "10"}}``),
    ``[]`` keys always hold lists, and repeated plain keys collect into a list.
    """
    params: dict[str, Any] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        segments = split_param_key(key)
        target = params
        for segment in segments[:-1]:
            child = target.get(segment)
            if not isinstance(child, dict):
                child = target[segment] = {}
            target = child
        leaf = segments[-1]
        existing = target.get(leaf)
        if isinstance(existing, list):
            existing.append(value)
        elif leaf.endswith("[]"):
            target[leaf] = [value]
        elif isinstance(existing, str):
            target[leaf] = [existing, value]
        else:
            target[leaf] = value
    return params


def _join_key(prefix: str | None, key: str) -> str:
    if prefix is None:
        return key
    if key.endswith("[]"):
        return f"{prefix}[{key[:-2]}][]"
    return f"{prefix}[{key}]"


def _flatten(value: Any, prefix: str | None) -> Iterator[tuple[str, str]]:
    if isinstance(value, Mapping):
        for key, child in value.items():
            yield from _flatten(child, _join_key(prefix, normalize_key(key)))
    elif prefix is None:
        return
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(item, prefix)
    elif value is None:
        yield prefix, ""
    else:
        yield prefix, str(value)


def build_nested_query(params: Mapping[Any, Any]) -> str:
    """Encode nested parameters as a query string, keeping insertion order."""
    return urlencode(list(_flatten(params, None)))
