"""Spot models.

The backend sends and receives spots with their required skills embedded
(:class:`Spot`). The store keeps spots normalized (:class:`SpotView`): skill
references are reduced to ids and resolved against the skill slice when read.
"""

from __future__ import annotations

from pydantic import Field

from pyroster.models._base import DomainObject
from pyroster.models.skill import Skill


class Spot(DomainObject):
    """A place or role that needs to be staffed (wire / denormalized shape)."""

    name: str
    required_skill_set: list[Skill] = Field(default_factory=list)
    """Skills an employee must hold to be assigned to this spot."""

    def to_view(self) -> SpotView:
        """Normalize by replacing embedded skills with their ids."""
        skill_ids: list[int] = []
        for skill in self.required_skill_set:
            if skill.id is None:
                raise ValueError(f"Spot {self.name!r} references a skill without id")
            skill_ids.append(skill.id)
        return SpotView(
            tenant_id=self.tenant_id,
            id=self.id,
            version=self.version,
            name=self.name,
            required_skill_set=skill_ids,
        )


class SpotView(DomainObject):
    """A spot as held in the store, with skill references by id."""

    name: str
    required_skill_set: list[int] = Field(default_factory=list)
    """Ids into the skill slice."""
