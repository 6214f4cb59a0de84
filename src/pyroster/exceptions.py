"""Custom exception hierarchy for pyroster."""

from __future__ import annotations

from collections.abc import Iterable


class RosterError(Exception):
    """Base exception for all pyroster errors."""


class RosterConfigError(RosterError):
    """Invalid or missing configuration."""


class RosterTransportError(RosterError):
    """HTTP-level failure (network, non-2xx, invalid JSON).

    A version mismatch rejected by the backend's optimistic locking
    surfaces as this error too; there is no dedicated conflict type.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RosterStateError(RosterError):
    """Store contents cannot answer a read."""


class SliceNotReadyError(RosterStateError):
    """A slice (or one it depends on) is mid-refresh.

    Single-item lookups raise this while loading; list selectors return an
    empty list instead.
    """

    def __init__(self, slices: Iterable[str]) -> None:
        self.slices = tuple(slices)
        super().__init__(f"Slices still loading: {', '.join(self.slices)}")


class EntityNotFoundError(RosterStateError):
    """No record with the requested id in the collection."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"No {entity} with id {entity_id}")
