"""Skill selectors."""

from __future__ import annotations

from pyroster.models import Skill
from pyroster.selectors._common import ensure_ready, is_ready, lookup
from pyroster.state.store import AppState


def get_skill_by_id(state: AppState, skill_id: int) -> Skill:
    ensure_ready({"skill": state.skill_list})
    return lookup(state.skill_list, "skill", skill_id)


def get_skill_list(state: AppState) -> list[Skill]:
    if not is_ready({"skill": state.skill_list}):
        return []
    return list(state.skill_list.map_by_id.values())
