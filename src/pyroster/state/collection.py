"""Normalized collection operations.

A collection is a plain ``dict`` from record id to record. Every function
here returns a new dict and leaves its argument untouched; entries that are
not affected keep their relative insertion order, and a replaced entry keeps
its position.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def _require_id(record: Any) -> int:
    record_id = getattr(record, "id", None)
    if record_id is None:
        raise ValueError(f"{type(record).__name__} has no id; only persisted records can be keyed")
    return int(record_id)


def create_id_map_from_list(records: Iterable[T]) -> dict[int, T]:
    """Build a collection keyed by each record's id.

    Duplicate ids collapse to the last record seen.
    """
    return {_require_id(record): record for record in records}


def map_with_element(collection: Mapping[int, T], record: T) -> dict[int, T]:
    """Insert *record*, replacing any record already stored under its id."""
    result = dict(collection)
    result[_require_id(record)] = record
    return result


def map_without_element(collection: Mapping[int, T], record: Any) -> dict[int, T]:
    """Remove a record given either the record or its id.

    Removing an absent id returns an equal copy.
    """
    record_id = record if isinstance(record, int) and not isinstance(record, bool) else _require_id(record)
    return {key: value for key, value in collection.items() if key != record_id}


def map_with_updated_element(collection: Mapping[int, T], record: T) -> dict[int, T]:
    """Replace the record stored under *record*'s id (same as insert)."""
    return map_with_element(collection, record)
