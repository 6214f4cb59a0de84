"""Generic CRUD coordinators shared by every entity kind.

Each coordinator reads the current tenant from the store, issues exactly one
transport call and dispatches the resulting actions. Transport errors are
never swallowed: they propagate to the caller after the loading flag (where
one was raised) has been cleared.

It is internal to pyroster; the per-kind modules are the public surface.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pyroster._transport import Transport
from pyroster.entities import EntityDescriptor
from pyroster.exceptions import RosterTransportError
from pyroster.models import DomainObject
from pyroster.state import actions
from pyroster.state.alert import show_error_message, show_success_message
from pyroster.state.store import Store

_logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord", bound=DomainObject)


def _tenant_id(store: Store) -> int:
    return store.state.tenant_data.current_tenant_id


def _require_id(entity: EntityDescriptor, record: DomainObject, operation: str) -> int:
    if record.id is None:
        raise ValueError(f"Cannot {operation} a {entity.path} without id")
    return record.id


def _parse(entity: EntityDescriptor, payload: Any, endpoint: str) -> Any:
    if not isinstance(payload, dict):
        raise RosterTransportError(
            f"Expected a {entity.path} object from {endpoint}, got {type(payload).__name__}",
            endpoint=endpoint,
        )
    return entity.model.model_validate(payload)


async def refresh_list(store: Store, client: Transport, entity: EntityDescriptor) -> list[Any]:
    """Replace the whole collection with the backend's list."""
    endpoint = entity.collection_path(_tenant_id(store))
    store.dispatch(actions.set_is_loading(entity, True))
    try:
        payload = await client.get(endpoint)
        if not isinstance(payload, list):
            raise RosterTransportError(
                f"Expected a list from {endpoint}, got {type(payload).__name__}",
                endpoint=endpoint,
            )
        records = [entity.model.model_validate(item) for item in payload]
        store.dispatch(actions.refresh_list(entity, records))
        _logger.debug("Loaded %d %s records", len(records), entity.path)
        return records
    finally:
        store.dispatch(actions.set_is_loading(entity, False))


async def add(store: Store, client: Transport, entity: EntityDescriptor, record: TRecord) -> TRecord:
    """Create *record* and store the backend's copy (with id and version)."""
    endpoint = entity.add_path(_tenant_id(store))
    try:
        payload = await client.post(endpoint, record.to_payload())
    except RosterTransportError:
        _logger.debug("Adding %s failed", entity.path, exc_info=True)
        raise
    created = _parse(entity, payload, endpoint)
    store.dispatch(show_success_message(entity.message_key("add"), {"name": getattr(record, "name", None)}))
    store.dispatch(actions.add_record(entity, created))
    return created


async def update(store: Store, client: Transport, entity: EntityDescriptor, record: TRecord) -> TRecord:
    """Replace *record* on the backend; it must carry the latest known version."""
    record_id = _require_id(entity, record, "update")
    if record.version is None:
        raise ValueError(f"Cannot update {entity.path} {record_id} without version")
    endpoint = entity.update_path(_tenant_id(store))
    try:
        payload = await client.post(endpoint, record.to_payload())
    except RosterTransportError:
        _logger.debug("Updating %s %s failed", entity.path, record_id, exc_info=True)
        raise
    updated = _parse(entity, payload, endpoint)
    store.dispatch(show_success_message(entity.message_key("update"), {"id": record_id}))
    store.dispatch(actions.update_record(entity, updated))
    return updated


async def remove(store: Store, client: Transport, entity: EntityDescriptor, record: DomainObject) -> bool:
    """Delete *record*; returns the backend's verdict.

    A refused deletion (for example a record still referenced elsewhere) is
    an expected outcome: it raises an error notification and leaves the
    collection untouched.
    """
    record_id = _require_id(entity, record, "remove")
    endpoint = entity.record_path(_tenant_id(store), record_id)
    try:
        deleted = await client.delete(endpoint)
    except RosterTransportError:
        _logger.debug("Removing %s %s failed", entity.path, record_id, exc_info=True)
        raise
    name = getattr(record, "name", None)
    if deleted:
        store.dispatch(show_success_message(entity.message_key("remove"), {"name": name}))
        store.dispatch(actions.remove_record(entity, record))
    else:
        _logger.info("Backend refused to remove %s %s", entity.path, record_id)
        store.dispatch(show_error_message(entity.message_key("remove", error=True), {"name": name}))
    return deleted
