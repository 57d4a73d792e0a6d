"""City (visited place) models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from worldwise.models._base import WorldwiseBaseModel

CityId = int
"""Identifier domain of a city.  Always assigned by the backend."""


def coerce_city_id(value: Any) -> CityId | None:
    """Coerce *value* into the city id domain.

    Ids read from URLs or the command line arrive as strings, so ``"2"``
    and ``2`` must compare equal.  Returns ``None`` when the value has no
    integer interpretation (``"abc"``, ``"2.5"``, ``True``).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return None


class Position(WorldwiseBaseModel):
    """Geographic coordinates of a visited place."""

    lat: float = Field(ge=-90.0, le=90.0)
    """Latitude in degrees."""
    lng: float = Field(ge=-180.0, le=180.0)
    """Longitude in degrees."""


class CityDraft(WorldwiseBaseModel):
    """A city as submitted for creation (no id yet).

    Parameters
    ----------
    name : str
        Display name, sent as ``cityName``.  Must be non-empty.
    country : str or None
        Country name.
    emoji : str or None
        Short decorative string, usually a flag.
    date : datetime
        When the place was visited.
    notes : str or None
        Free-text notes.
    position : Position
        Where the place is.
    """

    name: str = Field(alias="cityName", min_length=1)
    country: str | None = None
    emoji: str | None = None
    date: datetime
    notes: str | None = None
    position: Position

    def to_payload(self) -> dict[str, Any]:
        """JSON body for ``POST /cities``."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload.pop("id", None)
        return payload


class City(CityDraft):
    """A city record as stored by the backend."""

    id: CityId
