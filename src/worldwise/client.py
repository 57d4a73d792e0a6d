"""High-level async client for the cities backend."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from worldwise._api import cities as _cities_api
from worldwise._transport import HttpTransport
from worldwise.config import WorldwiseConfig
from worldwise.exceptions import WorldwiseContextMissingError
from worldwise.models.city import City, CityDraft, CityId

_logger = logging.getLogger(__name__)


class CitiesClient:
    """Async client for the ``/cities`` resource.

    This is the transport-only gateway used by
    :class:`~worldwise.state.store.CitiesStore`: every call is exactly
    one HTTP round trip, with no caching and no retries.

    Usage::

        async with CitiesClient(config) as client:
            cities = await client.fetch_all()
    """

    def __init__(
        self,
        config: WorldwiseConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or WorldwiseConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None

    @property
    def config(self) -> WorldwiseConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CitiesClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        _logger.debug("Cities client opened for %s", self._config.cities_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise WorldwiseContextMissingError("Client not initialized. Use 'async with CitiesClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Gateway operations
    # ------------------------------------------------------------------

    async def fetch_all(self) -> list[City]:
        """Fetch the whole collection, in server order."""
        return await _cities_api.fetch_cities(self._require_transport())

    async def fetch_one(self, city_id: CityId | str) -> City:
        """Fetch a single city.

        Raises
        ------
        WorldwiseNotFoundError
            If the backend has no city with this id.
        """
        return await _cities_api.fetch_city(self._require_transport(), city_id)

    async def create(self, draft: CityDraft | Mapping[str, Any]) -> City:
        """Create a city and return it with its server-assigned id.

        Raises
        ------
        WorldwiseValidationError
            If the draft is malformed, locally or per the backend.
        """
        transport = self._require_transport()
        return await _cities_api.create_city(transport, draft)

    async def remove(self, city_id: CityId | str) -> None:
        """Delete a city.  Deleting an absent id also succeeds."""
        await _cities_api.delete_city(self._require_transport(), city_id)
