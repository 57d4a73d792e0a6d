"""Immutable store snapshot and structured failures."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from worldwise.exceptions import (
    WorldwiseDecodeError,
    WorldwiseNotFoundError,
    WorldwiseTransportError,
    WorldwiseValidationError,
)
from worldwise.models.city import City


class FailureKind(StrEnum):
    NETWORK = "network"
    DECODE = "decode"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"

    @classmethod
    def from_exception(cls, exc: WorldwiseTransportError) -> FailureKind:
        if isinstance(exc, WorldwiseNotFoundError):
            return cls.NOT_FOUND
        if isinstance(exc, WorldwiseDecodeError):
            return cls.DECODE
        if isinstance(exc, WorldwiseValidationError):
            return cls.VALIDATION
        return cls.NETWORK


class Failure(BaseModel):
    """Why the last operation was rejected.

    ``message`` is the display text (also exposed as
    :attr:`CitiesState.error`); ``detail`` carries the underlying
    exception text for logs and diagnostics.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: FailureKind
    message: str
    detail: str = ""


class CitiesState(BaseModel):
    """Snapshot of the store.  Replaced, never mutated, on every transition."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cities: tuple[City, ...] = ()
    current_city: City | None = None
    is_loading: bool = False
    error: str = ""
    failure: Failure | None = None
