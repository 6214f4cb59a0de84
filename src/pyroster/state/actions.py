"""The action vocabulary shared by every entity slice.

Actions are immutable, tagged by ``kind`` and addressed to one slice by
``entity``. Creators take an :class:`~pyroster.entities.EntityDescriptor`
and normalize wire records on the way in, so reducers only ever see the
shape the store holds.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from pyroster.entities import EntityDescriptor, EntityKind


class ActionKind(StrEnum):
    SET_LOADING = "set-loading"
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"
    REFRESH_LIST = "refresh-list"
    SHOW_ALERT = "show-alert"
    CHANGE_TENANT = "change-tenant"


class _EntityAction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    entity: EntityKind


class SetLoadingAction(_EntityAction):
    kind: Literal[ActionKind.SET_LOADING] = ActionKind.SET_LOADING
    is_loading: bool


class AddAction(_EntityAction):
    kind: Literal[ActionKind.ADD] = ActionKind.ADD
    record: Any


class RemoveAction(_EntityAction):
    kind: Literal[ActionKind.REMOVE] = ActionKind.REMOVE
    record: Any


class UpdateAction(_EntityAction):
    kind: Literal[ActionKind.UPDATE] = ActionKind.UPDATE
    record: Any


class RefreshListAction(_EntityAction):
    kind: Literal[ActionKind.REFRESH_LIST] = ActionKind.REFRESH_LIST
    records: tuple[Any, ...] = Field(default_factory=tuple)


EntityAction = SetLoadingAction | AddAction | RemoveAction | UpdateAction | RefreshListAction


class ChangeTenantAction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[ActionKind.CHANGE_TENANT] = ActionKind.CHANGE_TENANT
    tenant_id: int


def set_is_loading(entity: EntityDescriptor, is_loading: bool) -> SetLoadingAction:
    return SetLoadingAction(entity=entity.kind, is_loading=is_loading)


def add_record(entity: EntityDescriptor, record: Any) -> AddAction:
    return AddAction(entity=entity.kind, record=entity.normalize(record))


def remove_record(entity: EntityDescriptor, record: Any) -> RemoveAction:
    """Removal only needs the id, so the record is kept as given."""
    return RemoveAction(entity=entity.kind, record=record)


def update_record(entity: EntityDescriptor, record: Any) -> UpdateAction:
    return UpdateAction(entity=entity.kind, record=entity.normalize(record))


def refresh_list(entity: EntityDescriptor, records: Iterable[Any]) -> RefreshListAction:
    return RefreshListAction(entity=entity.kind, records=tuple(entity.normalize(r) for r in records))


def change_tenant(tenant_id: int) -> ChangeTenantAction:
    return ChangeTenantAction(tenant_id=tenant_id)
