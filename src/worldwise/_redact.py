"""Debug-log view of outgoing city payloads.

The only request body the client sends is a city draft.  Its ``notes`` field
is free text written by the user, so it is replaced by its length.  Other
text fields are shortened so one log line stays readable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MASKED_FIELDS: frozenset[str] = frozenset({"notes"})


def redact_payload(body: Any, *, max_string: int = 80) -> Any:
    """Return a copy of *body* with user text masked, for DEBUG logs."""
    if not isinstance(body, Mapping):
        return f"<{type(body).__name__}>"

    redacted: dict[str, Any] = {}
    for key, value in body.items():
        if key in _MASKED_FIELDS and value is not None:
            redacted[key] = f"<{len(str(value))} chars>"
        elif isinstance(value, str) and len(value) > max_string:
            redacted[key] = f"{value[:max_string]}...<truncated>"
        else:
            redacted[key] = value
    return redacted
