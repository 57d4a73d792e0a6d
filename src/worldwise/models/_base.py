"""Base model for cities backend payloads.

Every record model inherits from :class:`WorldwiseBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase JSON keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``null`` and blank
  string values so the field default is used.
* A ``raw`` dict that captures the original payload.  It is never
  serialized back to the backend.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class WorldwiseBaseModel(BaseModel):
    """Base for city payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)
    """Original payload dict."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        """Strip empty values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = WorldwiseBaseModel._clean_dict(values)

        # Keep an explicitly passed raw= (e.g. when re-wrapping a model).
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
