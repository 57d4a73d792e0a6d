"""Custom exception hierarchy for worldwise."""

from __future__ import annotations


class WorldwiseError(Exception):
    """Base exception for all worldwise errors."""


class WorldwiseConfigError(WorldwiseError):
    """Invalid or missing configuration."""


class WorldwiseContextMissingError(WorldwiseError):
    """A client or store was used outside its owning scope.

    This is a setup defect, not a data condition.  The library never
    catches it, so the offending code path terminates immediately.
    """


class WorldwiseTransportError(WorldwiseError):
    """A remote call to the cities backend failed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class WorldwiseNetworkError(WorldwiseTransportError):
    """Transport or connectivity failure (connection refused, timeout, 5xx)."""


class WorldwiseDecodeError(WorldwiseTransportError):
    """Response body is not valid JSON or does not describe a city."""


class WorldwiseNotFoundError(WorldwiseTransportError):
    """The backend has no city with the requested id (HTTP 404)."""


class WorldwiseValidationError(WorldwiseTransportError):
    """A city draft is malformed.

    Raised both for drafts rejected locally before sending and for
    HTTP 400/422 replies to a write.
    """
