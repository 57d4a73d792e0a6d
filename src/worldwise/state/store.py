"""Client-side cities store.

This is the only component allowed to dispatch actions.  Every public
operation runs the same three phases: dispatch :class:`Loading`, call the
gateway, then dispatch either a success action or :class:`Rejected`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from worldwise._constants import (
    CREATE_CITY_ERROR,
    DELETE_CITY_ERROR,
    LOAD_CITIES_ERROR,
    LOAD_CITY_ERROR,
)
from worldwise.exceptions import WorldwiseContextMissingError, WorldwiseTransportError
from worldwise.models.city import City, CityDraft, CityId, coerce_city_id
from worldwise.state.actions import (
    Action,
    CitiesLoaded,
    CityCreated,
    CityDeleted,
    CityLoaded,
    Loading,
    Rejected,
)
from worldwise.state.reducer import reduce
from worldwise.state.snapshot import CitiesState, Failure, FailureKind

_logger = logging.getLogger(__name__)

Listener = Callable[[CitiesState], None]


class CitiesGateway(Protocol):
    """Remote operations the store depends on.

    :class:`~worldwise.client.CitiesClient` is the production
    implementation; tests pass in-memory fakes.
    """

    async def fetch_all(self) -> list[City]:
        ...

    async def fetch_one(self, city_id: CityId | str) -> City:
        ...

    async def create(self, draft: CityDraft | Mapping[str, Any]) -> City:
        ...

    async def remove(self, city_id: CityId | str) -> None:
        ...


def _failure(message: str, exc: WorldwiseTransportError) -> Failure:
    return Failure(kind=FailureKind.from_exception(exc), message=message, detail=str(exc))


class CitiesStore:
    """Holds the cities snapshot and the operations that change it.

    Operations never raise gateway errors: a failed remote call leaves
    the data untouched and records the failure in :attr:`error` and
    :attr:`CitiesState.failure`.

    Operations are serialized through a single lock, so overlapping
    calls run one after another in call order.  The store's scope ends
    with :meth:`close`; afterwards every operation and snapshot read
    raises :class:`WorldwiseContextMissingError`, and terminal writes of
    operations still in flight are dropped.
    """

    def __init__(self, gateway: CitiesGateway, *, initial_state: CitiesState | None = None) -> None:
        self._gateway = gateway
        self._state = initial_state or CitiesState()
        self._lock = asyncio.Lock()
        self._listeners: list[Listener] = []
        self._closed = False

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    @property
    def state(self) -> CitiesState:
        self._require_open()
        return self._state

    @property
    def cities(self) -> tuple[City, ...]:
        return self.state.cities

    @property
    def current_city(self) -> City | None:
        return self.state.current_city

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error(self) -> str:
        return self.state.error

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with every new snapshot.  Returns an unsubscribe callable."""
        self._require_open()
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """End the store's scope.  Idempotent."""
        self._closed = True
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_open(self) -> None:
        if self._closed:
            raise WorldwiseContextMissingError("CitiesStore was used outside its provider scope")

    def _dispatch(self, action: Action) -> None:
        if self._closed:
            _logger.debug("Dropping %s: store closed while the operation was in flight", action.type)
            return
        self._state = reduce(self._state, action)
        _logger.debug(
            "Dispatched %s (cities=%d, loading=%s)",
            action.type,
            len(self._state.cities),
            self._state.is_loading,
        )
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                _logger.debug("Store listener failed", exc_info=True)

    def _reject(self, message: str, exc: WorldwiseTransportError) -> None:
        _logger.debug("%s", message, exc_info=exc)
        self._dispatch(Rejected(failure=_failure(message, exc)))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def load_all(self) -> None:
        """Replace the collection with the backend's."""
        self._require_open()
        async with self._lock:
            self._dispatch(Loading())
            try:
                cities = await self._gateway.fetch_all()
            except WorldwiseTransportError as exc:
                self._reject(LOAD_CITIES_ERROR, exc)
                return
            self._dispatch(CitiesLoaded(cities=tuple(cities)))

    async def load_one(self, city_id: CityId | str) -> None:
        """Focus a city, fetching it unless it is already the current one."""
        self._require_open()
        async with self._lock:
            current = self._state.current_city
            wanted = coerce_city_id(city_id)
            if current is not None and wanted is not None and current.id == wanted:
                return

            self._dispatch(Loading())
            try:
                city = await self._gateway.fetch_one(city_id)
            except WorldwiseTransportError as exc:
                self._reject(LOAD_CITY_ERROR, exc)
                return
            self._dispatch(CityLoaded(city=city))

    async def create(self, draft: CityDraft | Mapping[str, Any]) -> None:
        """Create a city, append it to the collection and focus it."""
        self._require_open()
        async with self._lock:
            self._dispatch(Loading())
            try:
                city = await self._gateway.create(draft)
            except WorldwiseTransportError as exc:
                self._reject(CREATE_CITY_ERROR, exc)
                return
            self._dispatch(CityCreated(city=city))

    async def remove(self, city_id: CityId | str) -> None:
        """Delete a city and drop it from the collection (and focus)."""
        self._require_open()
        async with self._lock:
            self._dispatch(Loading())
            try:
                await self._gateway.remove(city_id)
            except WorldwiseTransportError as exc:
                self._reject(DELETE_CITY_ERROR, exc)
                return

            removed = coerce_city_id(city_id)
            self._dispatch(CityDeleted(city_id=city_id if removed is None else removed))
