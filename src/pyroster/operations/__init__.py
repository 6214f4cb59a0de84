"""Async coordinators between the store and the REST backend."""

from pyroster.operations.skill import add_skill, refresh_skill_list, remove_skill, update_skill
from pyroster.operations.spot import add_spot, refresh_spot_list, remove_spot, update_spot

__all__ = [
    "add_skill",
    "add_spot",
    "refresh_skill_list",
    "refresh_spot_list",
    "remove_skill",
    "remove_spot",
    "update_skill",
    "update_spot",
]
