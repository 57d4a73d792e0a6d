"""Store actions.

The set of actions is closed: :data:`Action` is a tagged union
discriminated on ``type`` and the reducer matches it exhaustively.
Action names are events ("cities/loaded"), not setters.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from worldwise.models.city import City, CityId
from worldwise.state.snapshot import Failure


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Loading(_Action):
    """An operation started its remote call."""

    type: Literal["loading"] = "loading"


class CitiesLoaded(_Action):
    type: Literal["cities/loaded"] = "cities/loaded"
    cities: tuple[City, ...]


class CityLoaded(_Action):
    type: Literal["city/loaded"] = "city/loaded"
    city: City


class CityCreated(_Action):
    type: Literal["city/created"] = "city/created"
    city: City


class CityDeleted(_Action):
    type: Literal["city/deleted"] = "city/deleted"
    city_id: CityId | str


class Rejected(_Action):
    """An operation's remote call failed."""

    type: Literal["rejected"] = "rejected"
    failure: Failure


Action = Annotated[
    Loading | CitiesLoaded | CityLoaded | CityCreated | CityDeleted | Rejected,
    Field(discriminator="type"),
]
