"""Data models for cities backend payloads."""

from worldwise.models._base import WorldwiseBaseModel
from worldwise.models.city import City, CityDraft, CityId, Position, coerce_city_id

__all__ = [
    "City",
    "CityDraft",
    "CityId",
    "Position",
    "WorldwiseBaseModel",
    "coerce_city_id",
]
