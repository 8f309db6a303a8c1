"""Pull searchable text fragments out of plain strings and records."""

from collections.abc import Sequence
from typing import Any

from src.fuzzysearch.paths import (
    collect_string_leaves,
    get_key,
    is_container,
    resolve_value,
)

ROOT_WILDCARD = ".*"


def extract_text(item: Any, keys: Sequence[str]) -> list[str]:
    """
    Produce the text fragments of one item, in key order.

    Args:
        item: A string, or a record (mapping / pydantic model)
        keys: Key patterns: "a.b" paths, "a.b.*" subtree wildcards or ".*"

    Returns:
        The item itself for strings; otherwise the string values each key
        contributes. Keys that resolve to nothing contribute nothing.
    """
    if isinstance(item, str):
        return [item]
    if not is_container(item) or not keys:
        return []

    results: list[str] = []
    for key in keys:
        if key == ROOT_WILDCARD:
            collect_string_leaves(item, results=results)

        elif key.endswith(ROOT_WILDCARD):
            base_path = key[:-2]
            subtree = resolve_value(item, base_path) if base_path else item
            if is_container(subtree):
                collect_string_leaves(subtree, results=results)

        else:
            if "." in key:
                value = resolve_value(item, key)
            else:
                value = get_key(item, key)
            if isinstance(value, str):
                results.append(value)

    return results
