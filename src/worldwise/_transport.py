"""HTTP transport with JSON decoding and status-code error mapping."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from worldwise._redact import redact_payload
from worldwise.config import WorldwiseConfig
from worldwise.exceptions import (
    WorldwiseDecodeError,
    WorldwiseNetworkError,
    WorldwiseNotFoundError,
    WorldwiseValidationError,
)

_logger = logging.getLogger(__name__)

_VALIDATION_STATUSES = frozenset({400, 422})


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(self, method: str, endpoint: str, *, body: Any = None) -> Any:
        ...


class HttpTransport:
    """Performs one HTTP round trip per call against the configured origin."""

    def __init__(self, config: WorldwiseConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        # total=None disables aiohttp's default 5 minute ceiling.
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def request_json(self, method: str, endpoint: str, *, body: Any = None) -> Any:
        """Send a request and return the decoded JSON body.

        An empty body decodes to ``None``.  Status codes map to the
        exception hierarchy: 404 is :class:`WorldwiseNotFoundError`,
        400/422 is :class:`WorldwiseValidationError` and every other
        non-2xx is :class:`WorldwiseNetworkError`.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        data: str | None = None
        if body is not None:
            headers["content-type"] = "application/json"
            data = json.dumps(body)

        url = f"{self._config.base_url}{endpoint}"

        if body is None:
            _logger.debug("%s %s", method, url)
        else:
            _logger.debug("%s %s body=%s", method, url, redact_payload(body))

        try:
            async with self._http.request(method, url, data=data, headers=headers, timeout=self._timeout) as resp:
                raw = await resp.read()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise WorldwiseNetworkError(
                f"{method} {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise WorldwiseNetworkError(
                f"{method} {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc

        if not 200 <= status < 300:
            snippet = raw[:200].decode("utf-8", errors="replace")
            message = f"HTTP {status} from {method} {endpoint}: {snippet}"
            if status == 404:
                raise WorldwiseNotFoundError(message, status_code=status, endpoint=endpoint)
            if status in _VALIDATION_STATUSES:
                raise WorldwiseValidationError(message, status_code=status, endpoint=endpoint)
            raise WorldwiseNetworkError(message, status_code=status, endpoint=endpoint)

        if not raw.strip():
            return None

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise WorldwiseDecodeError(
                f"Invalid JSON from {method} {endpoint}: {raw[:200]!r}",
                status_code=status,
                endpoint=endpoint,
            ) from exc
