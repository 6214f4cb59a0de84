"""Derived read views over the application state."""

from pyroster.selectors.skill import get_skill_by_id, get_skill_list
from pyroster.selectors.spot import get_spot_by_id, get_spot_list

__all__ = [
    "get_skill_by_id",
    "get_skill_list",
    "get_spot_by_id",
    "get_spot_list",
]
