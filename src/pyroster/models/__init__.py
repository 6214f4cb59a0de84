"""Data models for rostering records."""

from pyroster.models._base import DomainObject, RosterBaseModel
from pyroster.models.skill import Skill
from pyroster.models.spot import Spot, SpotView

__all__ = [
    "DomainObject",
    "RosterBaseModel",
    "Skill",
    "Spot",
    "SpotView",
]
