"""Dotted key paths and wildcard leaf collection over structured records."""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel

SEQUENCE_TYPES = (list, tuple)


def is_record(value: Any) -> bool:
    """Check if a value can be indexed by key (a mapping or a pydantic model)."""
    return isinstance(value, (Mapping, BaseModel))


def is_container(value: Any) -> bool:
    """Check if a value can be walked for string leaves."""
    return is_record(value) or isinstance(value, SEQUENCE_TYPES)


def _fields(record: Any) -> Mapping:
    if isinstance(record, BaseModel):
        return dict(record)
    return record


def get_key(record: Any, key: str) -> Any:
    """Look up a single key, returning None when the record has no such key."""
    if not is_record(record):
        return None
    return _fields(record).get(key)


def resolve_value(record: Any, path: str) -> Any:
    """
    Resolve a dotted key path against a record.

    Empty segments are skipped, so "a..b" reads like "a.b" and a path made
    only of dots resolves to the record itself.

    Args:
        record: The record to walk (mapping or pydantic model)
        path: Dotted path such as "job.title"

    Returns:
        The value at the final segment, or None if any step is not a record
        or is missing the key
    """
    current = record
    for part in path.split("."):
        if not part:
            continue
        if not is_record(current):
            return None
        current = _fields(current).get(part)
        if current is None:
            return None
    return current


def collect_string_leaves(
    value: Any,
    recursive: bool = True,
    results: Optional[list[str]] = None,
) -> list[str]:
    """
    Collect every string value found under a record or sequence.

    Args:
        value: Where to start walking
        recursive: Descend into nested records and sequences
        results: Output list to append to (a new one is created if omitted)

    Returns:
        String leaves in iteration order; empty if value is not a container
    """
    if results is None:
        results = []
    _walk(value, results, recursive, set())
    return results


def _walk(value: Any, results: list[str], recursive: bool, seen: set[int]) -> None:
    if is_record(value):
        children = _fields(value).values()
    elif isinstance(value, SEQUENCE_TYPES):
        children = value
    else:
        return

    # seen holds the ancestors of value; a cycle back to one of them stops here
    if id(value) in seen:
        return
    seen.add(id(value))

    for child in children:
        if isinstance(child, str):
            results.append(child)
        elif recursive and is_container(child):
            _walk(child, results, recursive, seen)

    seen.discard(id(value))
