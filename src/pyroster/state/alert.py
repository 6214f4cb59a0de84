"""User notifications.

Operations report outcomes by dispatching :class:`AlertAction` values; the
store appends them to ``AppState.alerts`` and rendering is left to whoever
subscribes. ``message_key`` names the outcome (``addSpot``,
``removeSpotError``...) and ``params`` carries interpolation values.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from pyroster.state.actions import ActionKind


class AlertVariant(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


class AlertInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    variant: AlertVariant
    message_key: str
    params: dict[str, Any] = Field(default_factory=dict)


class AlertAction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[ActionKind.SHOW_ALERT] = ActionKind.SHOW_ALERT
    alert: AlertInfo


def show_success_message(message_key: str, params: dict[str, Any] | None = None) -> AlertAction:
    return AlertAction(alert=AlertInfo(variant=AlertVariant.SUCCESS, message_key=message_key, params=params or {}))


def show_error_message(message_key: str, params: dict[str, Any] | None = None) -> AlertAction:
    return AlertAction(alert=AlertInfo(variant=AlertVariant.ERROR, message_key=message_key, params=params or {}))
