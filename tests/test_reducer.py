from __future__ import annotations

from typing import Any

import pytest
from pydantic import TypeAdapter

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
from worldwise.state.reducer import reduce
from worldwise.state.snapshot import CitiesState, Failure, FailureKind


def _city(city_id: int, name: str = "") -> City:
    return City.model_validate(
        {
            "id": city_id,
            "cityName": name or f"City {city_id}",
            "date": "2027-01-01T00:00:00Z",
            "position": {"lat": 1.0, "lng": 2.0},
        }
    )


def _failure() -> Failure:
    return Failure(kind=FailureKind.NETWORK, message="There was an error loading cities...", detail="boom")


def test_loading_keeps_data_and_error_visible() -> None:
    city = _city(1)
    state = CitiesState(cities=(city,), current_city=city, error="old", failure=_failure())

    result = reduce(state, Loading())

    assert result.is_loading is True
    assert result.cities == (city,)
    assert result.current_city is city
    assert result.error == "old"


def test_cities_loaded_replaces_and_dedupes() -> None:
    stale = _city(9)
    first, second, duplicate = _city(1, "Lagos"), _city(2, "Paris"), _city(1, "Lagos again")
    state = CitiesState(cities=(stale,), is_loading=True, error="old", failure=_failure())

    result = reduce(state, CitiesLoaded(cities=(first, second, duplicate)))

    assert [c.name for c in result.cities] == ["Lagos", "Paris"]
    assert result.is_loading is False
    assert result.error == ""
    assert result.failure is None


def test_city_loaded_sets_current_only() -> None:
    existing = _city(1)
    loaded = _city(5)
    state = CitiesState(cities=(existing,), is_loading=True)

    result = reduce(state, CityLoaded(city=loaded))

    assert result.current_city is loaded
    assert result.cities == (existing,)
    assert result.is_loading is False


def test_city_created_appends_and_focuses() -> None:
    a, b, c = _city(1), _city(2), _city(3)
    state = CitiesState(cities=(a, b), current_city=a, is_loading=True)

    result = reduce(state, CityCreated(city=c))

    assert [x.id for x in result.cities] == [1, 2, 3]
    assert result.cities[-1] is c
    assert result.current_city is c


def test_city_created_with_known_id_keeps_ids_unique() -> None:
    a, b = _city(1), _city(2)
    again = _city(1, "Replaced")
    state = CitiesState(cities=(a, b))

    result = reduce(state, CityCreated(city=again))

    assert [x.id for x in result.cities] == [2, 1]
    assert result.cities[-1].name == "Replaced"


def test_city_deleted_clears_matching_current() -> None:
    a, b = _city(1), _city(2)
    state = CitiesState(cities=(a, b), current_city=b, is_loading=True)

    result = reduce(state, CityDeleted(city_id=2))

    assert result.cities == (a,)
    assert result.current_city is None
    assert result.is_loading is False


def test_city_deleted_keeps_other_current() -> None:
    a, b = _city(1), _city(2)
    state = CitiesState(cities=(a, b), current_city=a)

    result = reduce(state, CityDeleted(city_id=2))

    assert result.cities == (a,)
    assert result.current_city is a


def test_city_deleted_with_non_numeric_id_changes_nothing() -> None:
    a = _city(1)
    state = CitiesState(cities=(a,), current_city=a, is_loading=True)

    result = reduce(state, CityDeleted(city_id="abc"))

    assert result.cities == (a,)
    assert result.current_city is a
    assert result.is_loading is False


def test_rejected_keeps_data_and_records_failure() -> None:
    a = _city(1)
    state = CitiesState(cities=(a,), current_city=a, is_loading=True)
    failure = _failure()

    result = reduce(state, Rejected(failure=failure))

    assert result.cities == (a,)
    assert result.current_city is a
    assert result.is_loading is False
    assert result.error == failure.message
    assert result.failure == failure


def test_reduce_does_not_mutate_input() -> None:
    state = CitiesState()
    reduce(state, Loading())
    assert state.is_loading is False


def test_unknown_action_is_a_programming_error() -> None:
    with pytest.raises(AssertionError):
        reduce(CitiesState(), object())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"type": "loading"}, Loading),
        ({"type": "city/deleted", "city_id": 4}, CityDeleted),
        ({"type": "rejected", "failure": {"kind": "not_found", "message": "m"}}, Rejected),
    ],
)
def test_actions_are_a_tagged_union(payload: dict[str, Any], expected: type) -> None:
    action = TypeAdapter(Action).validate_python(payload)
    assert isinstance(action, expected)


def test_unknown_action_tag_is_rejected_by_the_union() -> None:
    with pytest.raises(ValueError):
        TypeAdapter(Action).validate_python({"type": "city/renamed"})
