"""Client configuration for worldwise."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from urllib.parse import urlsplit

from worldwise._constants import BASE_URL, CITIES_ENDPOINT, USER_AGENT
from worldwise.exceptions import WorldwiseConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class WorldwiseConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Origin of the cities backend (e.g. a local json-server).  A
        trailing slash is stripped.  The ``/cities`` resource root is
        appended by the client.
    request_timeout : float or None
        Total timeout in seconds for a single HTTP round trip.  ``None``
        (the default) disables the timeout entirely, so a hung request
        keeps the store loading until the server answers.
    load_on_start : bool
        Whether :class:`~worldwise.provider.CitiesProvider` fetches the
        whole collection when its scope is entered.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = None
    load_on_start: bool = True
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        parts = urlsplit(base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise WorldwiseConfigError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        object.__setattr__(self, "base_url", base_url)

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise WorldwiseConfigError(f"request_timeout must be positive or None, got {self.request_timeout}")

    @property
    def cities_url(self) -> str:
        """Absolute URL of the cities collection."""
        return f"{self.base_url}{CITIES_ENDPOINT}"

    @classmethod
    def from_env(cls, **overrides: Any) -> WorldwiseConfig:
        """Create configuration from environment variables.

        Reads ``WORLDWISE_BASE_URL``, ``WORLDWISE_REQUEST_TIMEOUT`` and
        ``WORLDWISE_LOAD_ON_START``.  Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        WorldwiseConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("WORLDWISE_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        timeout_env = env.get("WORLDWISE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            stripped = timeout_env.strip()
            try:
                config_kwargs["request_timeout"] = float(stripped) if stripped else None
            except ValueError as exc:
                raise WorldwiseConfigError(f"WORLDWISE_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "load_on_start" not in overrides:
            config_kwargs["load_on_start"] = _env_bool(env.get("WORLDWISE_LOAD_ON_START"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
