"""Skill model."""

from __future__ import annotations

from pyroster.models._base import DomainObject


class Skill(DomainObject):
    """A qualification an employee can hold and a spot can require."""

    name: str
