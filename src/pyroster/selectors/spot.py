"""Spot selectors.

A stored :class:`~pyroster.models.SpotView` only knows its required skills
by id, so every spot read also depends on the skill slice. The
``select_*`` functions take both slices explicitly; the ``get_*`` functions
pick them out of the application state.

Looking up an unknown spot id, or a spot whose required skill is missing
from the skill slice, raises :class:`~pyroster.exceptions.EntityNotFoundError`
rather than returning ``None``. The list view never raises for a dangling
skill reference: it drops the unresolvable ids and keeps the spot, so the
list always has one entry per stored spot.
"""

from __future__ import annotations

from pyroster.models import Skill, Spot, SpotView
from pyroster.selectors._common import ensure_ready, is_ready, lookup
from pyroster.state.slice import SliceState
from pyroster.state.store import AppState


def denormalize_spot(spot: SpotView, skill_list: SliceState, *, strict: bool = True) -> Spot:
    """Resolve *spot*'s skill ids into full :class:`Skill` records.

    With ``strict=False`` skill ids missing from *skill_list* are skipped
    instead of raising :class:`~pyroster.exceptions.EntityNotFoundError`.
    """
    if strict:
        skills: list[Skill] = [lookup(skill_list, "skill", skill_id) for skill_id in spot.required_skill_set]
    else:
        skills = [skill_list.map_by_id[i] for i in spot.required_skill_set if i in skill_list.map_by_id]
    return Spot(
        tenant_id=spot.tenant_id,
        id=spot.id,
        version=spot.version,
        name=spot.name,
        required_skill_set=skills,
    )


def select_spot_by_id(spot_list: SliceState, skill_list: SliceState, spot_id: int) -> Spot:
    ensure_ready({"spot": spot_list, "skill": skill_list})
    return denormalize_spot(lookup(spot_list, "spot", spot_id), skill_list)


def select_spot_list(spot_list: SliceState, skill_list: SliceState) -> list[Spot]:
    if not is_ready({"spot": spot_list, "skill": skill_list}):
        return []
    return [denormalize_spot(spot, skill_list, strict=False) for spot in spot_list.map_by_id.values()]


def get_spot_by_id(state: AppState, spot_id: int) -> Spot:
    """Denormalized spot; raises while the spot or skill slice is loading."""
    return select_spot_by_id(state.spot_list, state.skill_list, spot_id)


def get_spot_list(state: AppState) -> list[Spot]:
    """All spots, denormalized; empty while the spot or skill slice is loading."""
    return select_spot_list(state.spot_list, state.skill_list)
