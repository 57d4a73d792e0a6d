"""Cities resource endpoints.

Endpoints:
  - GET    /cities        (collection read)
  - GET    /cities/{id}   (single-record read)
  - POST   /cities        (create)
  - DELETE /cities/{id}   (delete)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from worldwise._constants import CITIES_ENDPOINT
from worldwise._transport import Transport
from worldwise.exceptions import WorldwiseDecodeError, WorldwiseNotFoundError, WorldwiseValidationError
from worldwise.models.city import City, CityDraft, CityId

_logger = logging.getLogger(__name__)


def city_endpoint(city_id: CityId | str) -> str:
    """Path of a single city resource."""
    return f"{CITIES_ENDPOINT}/{str(city_id).strip()}"


def parse_city(data: Any, endpoint: str) -> City:
    """Validate a decoded JSON body as a :class:`City`."""
    if not isinstance(data, dict):
        raise WorldwiseDecodeError(
            f"Expected a city object from {endpoint}, got {type(data).__name__}",
            endpoint=endpoint,
        )
    try:
        return City.model_validate(data)
    except ValidationError as exc:
        raise WorldwiseDecodeError(
            f"Malformed city from {endpoint}: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc


def parse_city_list(data: Any, endpoint: str) -> list[City]:
    """Validate a decoded JSON body as a list of cities."""
    if not isinstance(data, list):
        raise WorldwiseDecodeError(
            f"Expected a list of cities from {endpoint}, got {type(data).__name__}",
            endpoint=endpoint,
        )
    return [parse_city(item, endpoint) for item in data]


def build_draft(draft: CityDraft | Mapping[str, Any]) -> CityDraft:
    """Normalize *draft* into a validated :class:`CityDraft`."""
    if isinstance(draft, CityDraft):
        return draft
    if not isinstance(draft, Mapping):
        raise WorldwiseValidationError(
            f"City draft must be a mapping, got {type(draft).__name__}",
            endpoint=CITIES_ENDPOINT,
        )
    # The backend assigns ids; a client-supplied one is never sent.
    fields = {key: value for key, value in draft.items() if key != "id"}
    try:
        return CityDraft.model_validate(fields)
    except ValidationError as exc:
        raise WorldwiseValidationError(
            f"Invalid city draft: {exc.error_count()} validation error(s)",
            endpoint=CITIES_ENDPOINT,
        ) from exc


async def fetch_cities(transport: Transport) -> list[City]:
    data = await transport.request_json("GET", CITIES_ENDPOINT)
    return parse_city_list(data, CITIES_ENDPOINT)


async def fetch_city(transport: Transport, city_id: CityId | str) -> City:
    endpoint = city_endpoint(city_id)
    data = await transport.request_json("GET", endpoint)
    # Some backends answer an unknown id with 200 and an empty object.
    if data is None or data == {}:
        raise WorldwiseNotFoundError(f"No city with id {city_id}", endpoint=endpoint)
    return parse_city(data, endpoint)


async def create_city(transport: Transport, draft: CityDraft | Mapping[str, Any]) -> City:
    payload = build_draft(draft).to_payload()
    data = await transport.request_json("POST", CITIES_ENDPOINT, body=payload)
    return parse_city(data, CITIES_ENDPOINT)


async def delete_city(transport: Transport, city_id: CityId | str) -> None:
    endpoint = city_endpoint(city_id)
    try:
        await transport.request_json("DELETE", endpoint)
    except WorldwiseNotFoundError:
        # Already absent and just deleted are the same outcome.
        _logger.debug("DELETE %s: city already absent", endpoint)
