"""High-level async client for the rostering REST backend."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyroster import operations as _ops
from pyroster import selectors as _selectors
from pyroster._transport import RestServiceClient, Transport
from pyroster.config import RosterConfig
from pyroster.exceptions import RosterError
from pyroster.models import Skill, Spot
from pyroster.state.actions import change_tenant
from pyroster.state.store import AppState, Store, TenantData

_logger = logging.getLogger(__name__)


class RosterClient:
    """Store plus transport, wired to one backend.

    Usage::

        async with RosterClient(config) as client:
            await client.refresh_skill_list()
            await client.refresh_spot_list()
            spots = client.get_spot_list()
    """

    def __init__(
        self,
        config: RosterConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        store: Store | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        if store is None:
            store = Store(AppState(tenant_data=TenantData(current_tenant_id=config.tenant_id)))
        self.store = store

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RosterClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = RestServiceClient(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise RosterError("Client not initialized. Use 'async with RosterClient(...) as client:'")
        return self._transport

    @property
    def state(self) -> AppState:
        return self.store.state

    # ------------------------------------------------------------------
    # Tenant
    # ------------------------------------------------------------------

    async def change_tenant(self, tenant_id: int) -> None:
        """Switch tenant and reload every collection for it."""
        _logger.debug("Switching to tenant %s", tenant_id)
        self.store.dispatch(change_tenant(tenant_id))
        await self.refresh_skill_list()
        await self.refresh_spot_list()

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    async def refresh_skill_list(self) -> list[Skill]:
        return await _ops.refresh_skill_list(self.store, self._require_transport())

    async def add_skill(self, skill: Skill) -> Skill:
        return await _ops.add_skill(self.store, self._require_transport(), skill)

    async def update_skill(self, skill: Skill) -> Skill:
        return await _ops.update_skill(self.store, self._require_transport(), skill)

    async def remove_skill(self, skill: Skill) -> bool:
        return await _ops.remove_skill(self.store, self._require_transport(), skill)

    def get_skill_by_id(self, skill_id: int) -> Skill:
        return _selectors.get_skill_by_id(self.store.state, skill_id)

    def get_skill_list(self) -> list[Skill]:
        return _selectors.get_skill_list(self.store.state)

    # ------------------------------------------------------------------
    # Spots
    # ------------------------------------------------------------------

    async def refresh_spot_list(self) -> list[Spot]:
        return await _ops.refresh_spot_list(self.store, self._require_transport())

    async def add_spot(self, spot: Spot) -> Spot:
        return await _ops.add_spot(self.store, self._require_transport(), spot)

    async def update_spot(self, spot: Spot) -> Spot:
        return await _ops.update_spot(self.store, self._require_transport(), spot)

    async def remove_spot(self, spot: Spot) -> bool:
        return await _ops.remove_spot(self.store, self._require_transport(), spot)

    def get_spot_by_id(self, spot_id: int) -> Spot:
        return _selectors.get_spot_by_id(self.store.state, spot_id)

    def get_spot_list(self) -> list[Spot]:
        return _selectors.get_spot_list(self.store.state)
