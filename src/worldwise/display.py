"""Plain-text rendering of cities for presentation code."""

from __future__ import annotations

from datetime import datetime
from urllib.parse import quote

from worldwise.models.city import City

_WIKIPEDIA_BASE = "https://en.wikipedia.org/wiki/"

# strftime's %A/%B follow LC_TIME; these do not.
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_visit_date(value: datetime) -> str:
    """Long English date, e.g. ``"Sunday, October 31, 2027"``."""
    return f"{_WEEKDAYS[value.weekday()]}, {_MONTHS[value.month - 1]} {value.day}, {value.year}"


def _short_date(value: datetime) -> str:
    return f"{_MONTHS[value.month - 1][:3]} {value.day:02d}, {value.year}"


def wikipedia_url(name: str) -> str:
    return f"{_WIKIPEDIA_BASE}{quote(name.strip())}"


def render_city(city: City) -> str:
    """Render the detail view of a city as text."""
    heading = f"{city.emoji} {city.name}" if city.emoji else city.name
    lines = [
        heading,
        f"You went to {city.name} on {format_visit_date(city.date)}",
    ]
    if city.notes:
        lines.append(f"Your notes: {city.notes}")
    lines.append(f"Check out {city.name} on Wikipedia: {wikipedia_url(city.name)}")
    return "\n".join(lines)


def render_city_row(city: City) -> str:
    """One-line summary used in list views."""
    emoji = f"{city.emoji} " if city.emoji else ""
    return f"{city.id:>10}  {emoji}{city.name}  ({_short_date(city.date)})"
