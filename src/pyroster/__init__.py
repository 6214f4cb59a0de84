"""pyroster - Async client-side sync layer for an employee-rostering REST backend."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyroster")
except PackageNotFoundError:
    __version__ = "0+local"
from pyroster.client import RosterClient
from pyroster.config import RosterConfig
from pyroster.entities import SKILL, SPOT, EntityDescriptor, EntityKind
from pyroster.exceptions import (
    EntityNotFoundError,
    RosterConfigError,
    RosterError,
    RosterStateError,
    RosterTransportError,
    SliceNotReadyError,
)
from pyroster.models import DomainObject, Skill, Spot, SpotView
from pyroster.state.store import AppState, Store

__all__ = [
    "__version__",
    "AppState",
    "DomainObject",
    "EntityDescriptor",
    "EntityKind",
    "EntityNotFoundError",
    "RosterClient",
    "RosterConfig",
    "RosterConfigError",
    "RosterError",
    "RosterStateError",
    "RosterTransportError",
    "SKILL",
    "SPOT",
    "Skill",
    "SliceNotReadyError",
    "Spot",
    "SpotView",
    "Store",
]
