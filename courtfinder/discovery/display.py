from __future__ import annotations

from urllib.parse import urlencode

from ..catalog.models import Court

_DIRECTIONS_BASE = "https://www.google.com/maps/dir/"


def format_distance(km: float | None) -> str | None:
    if km is None:
        return None
    return f"{km:.1f} km away"


def format_rating(average: float | None, count: int) -> str | None:
    """'★ 4.3 (3 reviews)', or None when there is nothing to show."""
    if average is None:
        return None
    noun = "review" if count == 1 else "reviews"
    return f"★ {average:.1f} ({count} {noun})"


def directions_url(court: Court) -> str:
    query = urlencode({
        "api": 1,
        "destination": f"{court.coordinates.lat},{court.coordinates.lng}",
    })
    return f"{_DIRECTIONS_BASE}?{query}"


def court_page_url(court: Court, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/courts/{court.id}"


def share_text(court: Court, base_url: str) -> str:
    return f"{court.name} - {court_page_url(court, base_url)}"
