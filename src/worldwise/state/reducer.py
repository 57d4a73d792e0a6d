"""Pure state transitions for the cities store."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from worldwise.models.city import City
from worldwise.state.actions import (
    Action,
    CitiesLoaded,
    CityCreated,
    CityDeleted,
    CityLoaded,
    Loading,
    Rejected,
)
from worldwise.state.snapshot import CitiesState


def _dedupe(cities: Iterable[City]) -> tuple[City, ...]:
    """Drop repeated ids, keeping the first occurrence and server order."""
    seen: set[int] = set()
    unique: list[City] = []
    for city in cities:
        if city.id in seen:
            continue
        seen.add(city.id)
        unique.append(city)
    return tuple(unique)


def reduce(state: CitiesState, action: Action) -> CitiesState:
    """Return the state that results from applying *action* to *state*.

    Loading keeps the existing data and error visible so callers can
    render stale content while a request is in flight.  Every successful
    terminal action clears the previous error.
    """
    match action:
        case Loading():
            return state.model_copy(update={"is_loading": True})
        case CitiesLoaded(cities=cities):
            return state.model_copy(
                update={
                    "is_loading": False,
                    "cities": _dedupe(cities),
                    "error": "",
                    "failure": None,
                }
            )
        case CityLoaded(city=city):
            return state.model_copy(
                update={
                    "is_loading": False,
                    "current_city": city,
                    "error": "",
                    "failure": None,
                }
            )
        case CityCreated(city=city):
            others = tuple(c for c in state.cities if c.id != city.id)
            return state.model_copy(
                update={
                    "is_loading": False,
                    "cities": (*others, city),
                    "current_city": city,
                    "error": "",
                    "failure": None,
                }
            )
        case CityDeleted(city_id=city_id):
            current = state.current_city
            if current is not None and current.id == city_id:
                current = None
            return state.model_copy(
                update={
                    "is_loading": False,
                    "cities": tuple(c for c in state.cities if c.id != city_id),
                    "current_city": current,
                    "error": "",
                    "failure": None,
                }
            )
        case Rejected(failure=failure):
            return state.model_copy(
                update={
                    "is_loading": False,
                    "error": failure.message,
                    "failure": failure,
                }
            )
        case _:
            assert_never(action)
