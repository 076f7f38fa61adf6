"""Application service: List Events use case (query)."""

from __future__ import annotations

from datetime import date

from eventmgmt.application.dto import EventSummaryDTO, to_event_summary
from eventmgmt.domain.repository.reference_repositories import EventRepository


class ListEventsHandler:

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def handle(self) -> list[EventSummaryDTO]:
        """Event summaries by start date; undated events come last."""
        events = sorted(
            self._event_repo.list_all(),
            key=lambda e: (e.date_start is None, e.date_start or date.min, e.id),
        )
        return [to_event_summary(e) for e in events]
