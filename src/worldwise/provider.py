"""Scope owner that wires a gateway to a store."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from worldwise.client import CitiesClient
from worldwise.config import WorldwiseConfig
from worldwise.exceptions import WorldwiseContextMissingError
from worldwise.state.store import CitiesGateway, CitiesStore

_logger = logging.getLogger(__name__)


class CitiesProvider:
    """Owns a :class:`CitiesStore` for the duration of an ``async with`` block.

    Collaborators receive the store handle explicitly rather than looking it
    up.  On entry the whole collection is loaded (unless
    ``config.load_on_start`` is false); on exit the store is closed, so any
    later use of the handle fails with :class:`WorldwiseContextMissingError`.

    Usage::

        async with CitiesProvider(config) as store:
            await store.load_one("2")
            print(store.current_city)

    Parameters
    ----------
    config : WorldwiseConfig or None
        Client configuration.  Defaults to ``WorldwiseConfig()``.
    session : aiohttp.ClientSession or None
        Shared HTTP session for the internally created client.
    gateway : CitiesGateway or None
        Pre-built gateway.  When given, no client is created and the
        caller owns the gateway's lifecycle.
    """

    def __init__(
        self,
        config: WorldwiseConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        gateway: CitiesGateway | None = None,
    ) -> None:
        self._config = config or WorldwiseConfig()
        self._session = session
        self._gateway = gateway
        self._client: CitiesClient | None = None
        self._store: CitiesStore | None = None

    @property
    def store(self) -> CitiesStore:
        if self._store is None:
            raise WorldwiseContextMissingError("CitiesProvider.store was used outside 'async with CitiesProvider(...)'")
        return self._store

    async def __aenter__(self) -> CitiesStore:
        gateway = self._gateway
        if gateway is None:
            client = CitiesClient(self._config, session=self._session)
            await client.__aenter__()
            self._client = client
            gateway = client

        store = CitiesStore(gateway)
        self._store = store
        if self._config.load_on_start:
            try:
                await store.load_all()
            except BaseException as exc:
                # __aexit__ never runs when __aenter__ raises.
                _logger.debug("Initial load aborted: %r", exc)
                await self.__aexit__(type(exc), exc, exc.__traceback__)
                raise
        return store

    async def __aexit__(self, *exc: Any) -> None:
        store = self._store
        self._store = None
        if store is not None:
            store.close()

        client = self._client
        self._client = None
        if client is not None:
            await client.__aexit__(*exc)
        _logger.debug("Cities provider closed")
