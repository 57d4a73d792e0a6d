"""worldwise - Async client-side store for a visited-cities REST backend."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("worldwise")
except PackageNotFoundError:
    __version__ = "0+local"
from worldwise.client import CitiesClient
from worldwise.config import WorldwiseConfig
from worldwise.exceptions import (
    WorldwiseConfigError,
    WorldwiseContextMissingError,
    WorldwiseDecodeError,
    WorldwiseError,
    WorldwiseNetworkError,
    WorldwiseNotFoundError,
    WorldwiseTransportError,
    WorldwiseValidationError,
)
from worldwise.models import City, CityDraft, CityId, Position
from worldwise.provider import CitiesProvider
from worldwise.state import CitiesState, CitiesStore, Failure, FailureKind

__all__ = [
    "__version__",
    "CitiesClient",
    "CitiesProvider",
    "CitiesState",
    "CitiesStore",
    "City",
    "CityDraft",
    "CityId",
    "Failure",
    "FailureKind",
    "Position",
    "WorldwiseConfig",
    "WorldwiseConfigError",
    "WorldwiseContextMissingError",
    "WorldwiseDecodeError",
    "WorldwiseError",
    "WorldwiseNetworkError",
    "WorldwiseNotFoundError",
    "WorldwiseTransportError",
    "WorldwiseValidationError",
]
