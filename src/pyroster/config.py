"""Client configuration for pyroster."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyroster._constants import BASE_URL, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from pyroster.exceptions import RosterConfigError


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value.strip())
    except ValueError as exc:
        raise RosterConfigError(f"{env_key} must be a {cast.__name__}, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RosterConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        REST root of the rostering backend, including the ``/rest`` prefix.
        Entity paths such as ``/tenant/0/spot/`` are appended verbatim.
    tenant_id : int
        Tenant the store starts scoped to. Can be changed later with
        :meth:`pyroster.client.RosterClient.change_tenant`.
    request_timeout : float
        Total timeout in seconds applied to every HTTP request.
    user_agent : str
        ``user-agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    tenant_id: int = 0
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url:
            raise RosterConfigError("base_url must be non-empty")
        if self.request_timeout <= 0:
            raise RosterConfigError("request_timeout must be positive")
        # Paths always start with "/", so a trailing slash would double up.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> RosterConfig:
        """Create configuration from environment variables.

        Reads ``ROSTER_BASE_URL``, ``ROSTER_TENANT_ID``,
        ``ROSTER_REQUEST_TIMEOUT`` and ``ROSTER_USER_AGENT``. Explicit
        keyword arguments override environment values.

        Raises
        ------
        RosterConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("ROSTER_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("ROSTER_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        tenant_env = env.get("ROSTER_TENANT_ID")
        if tenant_env is not None and "tenant_id" not in overrides:
            config_kwargs["tenant_id"] = _env_number("ROSTER_TENANT_ID", tenant_env, int)

        timeout_env = env.get("ROSTER_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_number("ROSTER_REQUEST_TIMEOUT", timeout_env, float)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
