"""Spot operations.

Spots travel over the wire with their required skills embedded; the
store receives them normalized to skill ids via the ``SPOT`` descriptor.
"""

from __future__ import annotations

from pyroster._transport import Transport
from pyroster.entities import SPOT
from pyroster.models import Spot
from pyroster.operations import _common
from pyroster.state.store import Store


async def refresh_spot_list(store: Store, client: Transport) -> list[Spot]:
    """Fetch every spot of the current tenant, raising the loading flag meanwhile."""
    return await _common.refresh_list(store, client, SPOT)


async def add_spot(store: Store, client: Transport, spot: Spot) -> Spot:
    """Create a spot; the returned copy carries the backend-assigned id and version."""
    return await _common.add(store, client, SPOT, spot)


async def update_spot(store: Store, client: Transport, spot: Spot) -> Spot:
    """Replace a spot; it must carry the latest known version."""
    return await _common.update(store, client, SPOT, spot)


async def remove_spot(store: Store, client: Transport, spot: Spot) -> bool:
    """Delete a spot; ``False`` when the backend refuses (spot still in use)."""
    return await _common.remove(store, client, SPOT, spot)
