"""Application state container.

The store holds one immutable :class:`AppState` and is the only place it is
replaced: every change goes through :meth:`Store.dispatch`, which runs the
root reducer synchronously and then notifies listeners. Operations never
assign state directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from pyroster.entities import EntityKind
from pyroster.state.actions import ChangeTenantAction, EntityAction
from pyroster.state.alert import AlertAction, AlertInfo
from pyroster.state.slice import SliceState, reduce_slice

_logger = logging.getLogger(__name__)

Action = EntityAction | AlertAction | ChangeTenantAction
Reducer = Callable[["AppState", Action], "AppState"]
Listener = Callable[[Action], None]

_SLICE_FIELDS: dict[EntityKind, str] = {
    EntityKind.SKILL: "skill_list",
    EntityKind.SPOT: "spot_list",
}


class TenantData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    current_tenant_id: int = 0


class AppState(BaseModel):
    """Everything the store knows, one slice per entity kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tenant_data: TenantData = Field(default_factory=TenantData)
    skill_list: SliceState = Field(default_factory=SliceState)
    spot_list: SliceState = Field(default_factory=SliceState)
    alerts: tuple[AlertInfo, ...] = ()

    def slice_for(self, kind: EntityKind) -> SliceState:
        return getattr(self, _SLICE_FIELDS[kind])


def root_reducer(state: AppState, action: Action) -> AppState:
    """Route *action* to the part of the state it addresses.

    Anything that is not a known action leaves the state unchanged.
    """
    if isinstance(action, AlertAction):
        return state.model_copy(update={"alerts": (*state.alerts, action.alert)})
    if isinstance(action, ChangeTenantAction):
        # Collections are tenant scoped; drop the previous tenant's records.
        return state.model_copy(
            update={
                "tenant_data": TenantData(current_tenant_id=action.tenant_id),
                **{field_name: SliceState() for field_name in _SLICE_FIELDS.values()},
            }
        )
    if not isinstance(action, EntityAction):
        _logger.debug("Ignoring unknown action %s", type(action).__name__)
        return state
    field_name = _SLICE_FIELDS[action.entity]
    return state.model_copy(update={field_name: reduce_slice(getattr(state, field_name), action)})


class Store:
    """Synchronous dispatch loop around a pure reducer.

    Usage::

        store = Store()
        unsubscribe = store.subscribe(print)
        store.dispatch(change_tenant(1))
    """

    def __init__(
        self,
        initial_state: AppState | None = None,
        *,
        reducer: Reducer = root_reducer,
    ) -> None:
        self._state = initial_state if initial_state is not None else AppState()
        self._reducer = reducer
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def get_state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> Action:
        """Apply *action* and notify listeners; returns the action."""
        self._state = self._reducer(self._state, action)
        for listener in list(self._listeners):
            try:
                listener(action)
            except Exception:
                _logger.debug("Store listener failed for %s", type(action).__name__, exc_info=True)
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; call the returned function to unregister."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
