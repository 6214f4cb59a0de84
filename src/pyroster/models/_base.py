"""Base model for rostering domain records.

Every record the backend persists inherits from :class:`DomainObject`
which provides:

* ``alias_generator=to_camel`` so camelCase wire keys map
  automatically to snake_case fields.
* The ``tenant_id`` / ``id`` / ``version`` identity triple shared by every
  entity kind. ``id`` and ``version`` are ``None`` for a transient record
  that the backend has not assigned them to yet.
* :meth:`DomainObject.to_payload` for serializing a request body.

Records are frozen: a change is always a new record carrying the latest
known ``version``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RosterBaseModel(BaseModel):
    """Base for all wire models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class DomainObject(RosterBaseModel):
    """A tenant-scoped, versioned record."""

    tenant_id: int
    id: int | None = None
    version: int | None = None

    @property
    def is_persisted(self) -> bool:
        """Whether the backend has assigned an id."""
        return self.id is not None

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready camelCase body; unassigned identity fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
