"""EventInfo: an event attendees can register for."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class EventInfo:

    id: int
    title: str
    description: str | None = None
    location: str | None = None
    city: str | None = None
    date_start: date | None = None
    date_end: date | None = None
    featured_image_url: str | None = None
