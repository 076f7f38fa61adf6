"""Integration tests for the order read side."""

from datetime import datetime, timedelta, timezone

import pytest

from eventmgmt.application.dto import OrderDTO
from eventmgmt.domain.exceptions import InvalidArgumentError
from tests.builders import build_world, make_line, make_order

T0 = datetime(2026, 9, 1, 12, 0, tzinfo=timezone.utc)


def _orders_at(hours: list[int]):
    return [make_order(order_time=T0 + timedelta(hours=h)) for h in hours]


class TestListOrders:

    def test_newest_first(self):
        world = build_world(_orders_at([0, 2, 1]))
        times = [o.order_time for o in world.order_service.list_orders()]
        assert times == sorted(times, reverse=True)

    def test_pagination_after_ordering(self):
        world = build_world(_orders_at([0, 1, 2, 3, 4]))
        page = world.order_service.list_orders(count=2, offset=1)
        assert [o.order_time for o in page] == [T0 + timedelta(hours=3), T0 + timedelta(hours=2)]

    def test_offset_past_end(self):
        world = build_world(_orders_at([0]))
        assert world.order_service.list_orders(count=5, offset=10) == []

    def test_negative_paging_rejected(self):
        world = build_world()
        with pytest.raises(InvalidArgumentError):
            world.order_service.list_orders(count=-1)
        with pytest.raises(InvalidArgumentError):
            world.order_service.list_orders(offset=-1)


class TestGetById:

    def test_includes_references(self):
        order = make_order(lines=[make_line()])
        order.payment_method_id = 1
        world = build_world([order])

        loaded = world.order_service.get_by_id(order.id)

        assert len(loaded.lines) == 1
        assert loaded.user.name == "Kari Nordmann"
        assert loaded.registration.id == 10
        assert loaded.payment_method.name == "Invoice"

    def test_missing_payment_method_stays_none(self):
        order = make_order()
        world = build_world([order])
        assert world.order_service.get_by_id(order.id).payment_method is None

    def test_not_found_returns_none(self):
        assert build_world().order_service.get_by_id(123) is None


class TestGetForEvent:

    def test_orders_ordered_by_participant_name(self):
        ola = make_order(registration_id=11, user_id=2, customer_name="Ola Hansen")
        kari = make_order(registration_id=10)
        other_event = make_order(registration_id=12)
        world = build_world([ola, kari, other_event])

        result = world.order_service.get_for_event(1)

        assert [dto.participant_name for dto in result] == ["Kari Nordmann", "Ola Hansen"]
        assert all(isinstance(dto, OrderDTO) for dto in result)

    def test_snapshots_are_read_only(self):
        world = build_world([make_order(lines=[make_line()])])
        dto = world.order_service.get_for_event(1)[0]
        with pytest.raises(AttributeError):
            dto.customer_name = "changed"  # type: ignore[misc]
        assert isinstance(dto.lines, tuple)

    def test_event_without_registrations(self):
        assert build_world().order_service.get_for_event(99) == []
