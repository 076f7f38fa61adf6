"""Integration tests for the event and participant listings."""

from datetime import date

import pytest

from eventmgmt.domain.exceptions import EntityNotFoundError
from eventmgmt.domain.model.event import EventInfo
from tests.builders import build_world


class TestListEvents:

    def test_summaries_by_start_date(self):
        world = build_world()
        summaries = world.list_events.handle()
        assert [s.title for s in summaries] == ["Python Meetup", "Nordic Dev Conference"]

    def test_summary_fields(self):
        summary = next(s for s in build_world().list_events.handle() if s.id == 1)
        assert summary.location == "Oslo Spektrum"
        assert summary.city == "Oslo"
        assert summary.date_start == date(2026, 11, 5)
        assert summary.date_end == date(2026, 11, 6)
        assert summary.featured_image_url == "https://example.com/ndc.png"

    def test_undated_events_last(self):
        world = build_world()
        world.events.save(EventInfo(id=3, title="To be announced"))
        assert world.list_events.handle()[-1].title == "To be announced"


class TestListParticipants:

    def test_participants_with_user_details(self):
        world = build_world()
        world.attendance.set(11, True)

        result = world.list_participants.handle(1)

        assert result.kind == "data"
        by_reg = {p.registration_id: p for p in result.items}
        assert by_reg[10].name == "Kari Nordmann"
        assert by_reg[10].email == "kari@example.com"
        assert by_reg[10].phone == "+47 900 00 001"
        assert by_reg[10].attended is False
        assert by_reg[11].attended is True

    def test_event_without_participants_is_empty(self):
        world = build_world()
        world.events.save(EventInfo(id=3, title="Empty"))
        result = world.list_participants.handle(3)
        assert result.kind == "empty"
        assert result.items == ()

    def test_unknown_event(self):
        with pytest.raises(EntityNotFoundError, match="Event #9 not found"):
            build_world().list_participants.handle(9)
