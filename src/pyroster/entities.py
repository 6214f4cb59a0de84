"""Entity kinds handled by the store and their per-kind wiring.

Every kind shares the same collection, reducer, operation and selector
machinery; an :class:`EntityDescriptor` carries the few things that differ
(REST path segment, notification label, wire model, normalizer).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pyroster.models import DomainObject, Skill, Spot, SpotView


class EntityKind(StrEnum):
    SKILL = "skill"
    SPOT = "spot"


def _identity(record: Any) -> Any:
    return record


def _normalize_spot(record: Spot | SpotView) -> SpotView:
    if isinstance(record, SpotView):
        return record
    return record.to_view()


@dataclasses.dataclass(frozen=True)
class EntityDescriptor:
    """Static description of one entity kind.

    Parameters
    ----------
    kind : EntityKind
        Store slice the kind's actions are routed to.
    path : str
        REST path segment, as in ``/tenant/{tenantId}/<path>/``.
    label : str
        Capitalized name used to build notification keys
        (``add<Label>``, ``update<Label>``, ``remove<Label>``,
        ``remove<Label>Error``).
    model : type[DomainObject]
        Wire model the backend responses are parsed into.
    normalize : Callable
        Converts a wire record into the shape held in the store.
    """

    kind: EntityKind
    path: str
    label: str
    model: type[DomainObject]
    normalize: Callable[[Any], Any] = _identity

    def collection_path(self, tenant_id: int) -> str:
        return f"/tenant/{tenant_id}/{self.path}/"

    def add_path(self, tenant_id: int) -> str:
        return f"/tenant/{tenant_id}/{self.path}/add"

    def update_path(self, tenant_id: int) -> str:
        return f"/tenant/{tenant_id}/{self.path}/update"

    def record_path(self, tenant_id: int, record_id: int) -> str:
        return f"/tenant/{tenant_id}/{self.path}/{record_id}"

    def message_key(self, operation: str, *, error: bool = False) -> str:
        """Notification key, e.g. ``message_key("remove", error=True)`` -> ``removeSpotError``."""
        suffix = "Error" if error else ""
        return f"{operation}{self.label}{suffix}"


SKILL = EntityDescriptor(kind=EntityKind.SKILL, path="skill", label="Skill", model=Skill)
SPOT = EntityDescriptor(kind=EntityKind.SPOT, path="spot", label="Spot", model=Spot, normalize=_normalize_spot)
