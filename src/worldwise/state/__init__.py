"""State/store layer.

This package is the single source of truth for the client-side view of the
cities collection.  Every change goes through an action applied by the
reducer; the store is the only component allowed to dispatch them.
"""

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
from worldwise.state.store import CitiesGateway, CitiesStore

__all__ = [
    "Action",
    "CitiesGateway",
    "CitiesLoaded",
    "CitiesState",
    "CitiesStore",
    "CityCreated",
    "CityDeleted",
    "CityLoaded",
    "Failure",
    "FailureKind",
    "Loading",
    "Rejected",
    "reduce",
]
