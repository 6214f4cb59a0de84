"""Skill operations."""

from __future__ import annotations

from pyroster._transport import Transport
from pyroster.entities import SKILL
from pyroster.models import Skill
from pyroster.operations import _common
from pyroster.state.store import Store


async def refresh_skill_list(store: Store, client: Transport) -> list[Skill]:
    """Fetch every skill of the current tenant, raising the loading flag meanwhile."""
    return await _common.refresh_list(store, client, SKILL)


async def add_skill(store: Store, client: Transport, skill: Skill) -> Skill:
    """Create a skill; the returned copy carries the backend-assigned id and version."""
    return await _common.add(store, client, SKILL, skill)


async def update_skill(store: Store, client: Transport, skill: Skill) -> Skill:
    """Replace a skill; it must carry the latest known version."""
    return await _common.update(store, client, SKILL, skill)


async def remove_skill(store: Store, client: Transport, skill: Skill) -> bool:
    """Delete a skill; ``False`` when the backend refuses (skill still required somewhere)."""
    return await _common.remove(store, client, SKILL, skill)
