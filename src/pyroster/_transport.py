"""HTTP transport for the rostering REST backend."""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Protocol

import aiohttp

from pyroster.config import RosterConfig
from pyroster.exceptions import RosterTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the operation modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`RestServiceClient`) concrete.
    Every method raises :class:`RosterTransportError` on network or server
    failure. ``delete`` resolves to the backend's boolean verdict instead of
    signalling a refused deletion through an error.
    """

    async def get(self, path: str) -> Any:
        ...

    async def post(self, path: str, body: Any) -> Any:
        ...

    async def put(self, path: str, body: Any) -> Any:
        ...

    async def delete(self, path: str) -> bool:
        ...

    async def upload_file(self, path: str, file: bytes | IO[bytes], *, filename: str = "file") -> Any:
        ...


class RestServiceClient:
    """JSON-over-HTTP transport bound to one backend base URL."""

    def __init__(self, config: RosterConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        return await self._request("POST", path, json_body=body)

    async def put(self, path: str, body: Any) -> Any:
        return await self._request("PUT", path, json_body=body)

    async def delete(self, path: str) -> bool:
        result = await self._request("DELETE", path)
        if not isinstance(result, bool):
            raise RosterTransportError(
                f"Expected a boolean from DELETE {path}, got {type(result).__name__}",
                endpoint=path,
            )
        return result

    async def upload_file(self, path: str, file: bytes | IO[bytes], *, filename: str = "file") -> Any:
        form = aiohttp.FormData()
        form.add_field("file", file, filename=filename, content_type="application/octet-stream")
        return await self._request("POST", path, form=form)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        form: aiohttp.FormData | None = None,
    ) -> Any:
        """Send one request and decode the JSON reply.

        Raises :class:`RosterTransportError` for connection failures,
        timeouts, non-2xx statuses and undecodable bodies.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        data: Any = form
        if json_body is not None:
            headers["content-type"] = "application/json; charset=UTF-8"
            data = json.dumps(json_body, separators=(",", ":"))

        url = f"{self._config.base_url}{path}"
        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, data=data, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise RosterTransportError(
                        f"HTTP {resp.status} from {method} {path}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=path,
                    )
        except RosterTransportError:
            raise
        except TimeoutError as exc:
            raise RosterTransportError(
                f"{method} {path} timed out after {self._config.request_timeout}s",
                endpoint=path,
            ) from exc
        except aiohttp.ClientError as exc:
            raise RosterTransportError(
                f"{method} {path} failed: {exc}",
                endpoint=path,
            ) from exc

        if not text.strip():
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise RosterTransportError(
                f"Invalid JSON from {method} {path}: {text[:200]}",
                status_code=resp.status,
                endpoint=path,
            ) from exc
