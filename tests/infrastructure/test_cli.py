"""Tests for the click command line."""

import pytest
from click.testing import CliRunner

from eventmgmt.domain.model.order import OrderStatus
from eventmgmt.infrastructure.cli.main import cli
from tests.builders import make_line, make_order


@pytest.fixture()
def run(settings, container):
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(
            cli,
            ["--data-dir", str(settings.data_dir), *args],
            env={"LOG_LEVEL": "WARNING"},
        )

    return invoke


def _seed_order(container, status=OrderStatus.DRAFT, lines=None):
    order = make_order(status=status, lines=lines)
    container.orders.save(order)
    return order


class TestOrderCommands:

    def test_create_and_show(self, run, container):
        result = run("order", "create", "--registration", "10", "--payment-method", "1")
        assert result.exit_code == 0, result.output
        assert "Order #1 created" in result.output

        result = run("order", "add-line", "--id", "1", "--product", "100", "--variant", "101")
        assert result.exit_code == 0, result.output

        result = run("order", "show", "--id", "1")
        assert result.exit_code == 0, result.output
        assert "Conference ticket (Student)" in result.output
        assert "status=DRAFT" in result.output

    def test_show_missing_order(self, run):
        result = run("order", "show", "--id", "42")
        assert result.exit_code == 1
        assert "Order #42 not found" in result.output

    def test_delete_invoiced_order_fails(self, run, container):
        order = _seed_order(container, status=OrderStatus.INVOICED)
        result = run("order", "delete", "--id", str(order.id))
        assert result.exit_code == 1
        assert "Invoiced orders cannot be deleted" in result.output
        assert container.orders.get_by_id(order.id) is not None

    def test_free_and_status_commands(self, run, container):
        order = _seed_order(container, lines=[make_line("100", 2)])

        result = run("order", "free", "--id", str(order.id))
        assert "1 line(s) changed" in result.output

        assert run("order", "invoice", "--id", str(order.id)).exit_code == 0
        assert run("order", "verify", "--id", str(order.id)).exit_code == 0
        result = run("order", "cancel", "--id", str(order.id))
        assert result.exit_code == 1
        assert "Cannot cancel" in result.output
        assert container.orders.get_by_id(order.id).status == OrderStatus.VERIFIED

    def test_update_and_delete_line(self, run, container):
        order = _seed_order(container, lines=[make_line("100", 2)])
        line_id = str(order.lines[0].id)

        result = run("order", "update-line", "--line", line_id, "--quantity", "4", "--price", "90")
        assert result.exit_code == 0, result.output
        assert container.orders.get_by_id(order.id).lines[0].quantity.value == 4

        assert run("order", "delete-line", "--line", line_id).exit_code == 0
        assert container.orders.get_by_id(order.id).lines == []

    def test_details(self, run, container):
        order = _seed_order(container)
        result = run(
            "order", "details", "--id", str(order.id),
            "--name", "Acme AS", "--email", "billing@acme.no", "--invoice-ref", "PO-3",
        )
        assert result.exit_code == 0, result.output
        assert container.orders.get_by_id(order.id).customer_name == "Acme AS"

    def test_list_empty(self, run):
        result = run("order", "list")
        assert "No orders found." in result.output


class TestEventAndRegistrationCommands:

    def test_event_list(self, run):
        result = run("event", "list")
        assert result.exit_code == 0, result.output
        assert "Nordic Dev Conference" in result.output

    def test_participants(self, run):
        result = run("event", "participants", "--id", "1")
        assert "Kari Nordmann" in result.output
        assert "Ola Hansen" in result.output

    def test_attendance_toggle(self, run, container):
        result = run("registration", "attendance", "--id", "10", "--attended")
        assert "attended: yes" in result.output
        assert container.registrations.get_by_id(10).attended is True

        result = run("registration", "attendance", "--id", "10")
        assert "attended: yes" in result.output

    def test_attendance_unknown_registration(self, run):
        result = run("registration", "attendance", "--id", "404")
        assert result.exit_code == 1
        assert "Registration #404 not found" in result.output
