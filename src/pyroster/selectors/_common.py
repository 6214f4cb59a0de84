"""Readiness and lookup helpers shared by the selector modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyroster.exceptions import EntityNotFoundError, SliceNotReadyError
from pyroster.state.slice import SliceState


def loading_slices(slices: Mapping[str, SliceState]) -> list[str]:
    return [name for name, state in slices.items() if state.is_loading]


def is_ready(slices: Mapping[str, SliceState]) -> bool:
    """True when none of *slices* is mid-refresh."""
    return not loading_slices(slices)


def ensure_ready(slices: Mapping[str, SliceState]) -> None:
    """Raise :class:`SliceNotReadyError` naming every slice still loading."""
    loading = loading_slices(slices)
    if loading:
        raise SliceNotReadyError(loading)


def lookup(state: SliceState, entity: str, entity_id: int) -> Any:
    try:
        return state.map_by_id[entity_id]
    except KeyError:
        raise EntityNotFoundError(entity, entity_id) from None
