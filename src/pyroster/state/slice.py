"""Per-entity slice state and its reducer."""

from __future__ import annotations

from typing import Any, assert_never

from pydantic import BaseModel, ConfigDict, Field

from pyroster.state.actions import (
    AddAction,
    EntityAction,
    RefreshListAction,
    RemoveAction,
    SetLoadingAction,
    UpdateAction,
)
from pyroster.state.collection import (
    create_id_map_from_list,
    map_with_element,
    map_with_updated_element,
    map_without_element,
)


class SliceState(BaseModel):
    """Loading flag plus the normalized collection of one entity kind.

    While ``is_loading`` is true the collection is stale and selectors
    refuse to read it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_loading: bool = False
    map_by_id: dict[int, Any] = Field(default_factory=dict)


def reduce_slice(state: SliceState, action: EntityAction) -> SliceState:
    """Return the slice state after *action*; never mutates *state*."""
    if isinstance(action, SetLoadingAction):
        return state.model_copy(update={"is_loading": action.is_loading})
    if isinstance(action, AddAction):
        return state.model_copy(update={"map_by_id": map_with_element(state.map_by_id, action.record)})
    if isinstance(action, RemoveAction):
        return state.model_copy(update={"map_by_id": map_without_element(state.map_by_id, action.record)})
    if isinstance(action, UpdateAction):
        return state.model_copy(update={"map_by_id": map_with_updated_element(state.map_by_id, action.record)})
    if isinstance(action, RefreshListAction):
        return state.model_copy(update={"map_by_id": create_id_map_from_list(action.records)})
    assert_never(action)
