"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from eventmgmt.application.dto import OrderDTO, to_order_dto
from eventmgmt.application.order_service import OrderService
from eventmgmt.domain.exceptions import DomainException
from eventmgmt.infrastructure.bootstrap import build_container
from eventmgmt.infrastructure.config import Settings


def _service(settings: Settings) -> OrderService:
    return build_container(settings).order_service()


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, editable={'yes' if dto.can_edit else 'no'})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    if dto.participant_name:
        click.echo(f"Participant: {dto.participant_name}")
    if dto.customer_invoice_reference:
        click.echo(f"Invoice ref: {dto.customer_invoice_reference}")
    if dto.comments:
        click.echo(f"Comments: {dto.comments}")
    click.echo(f"Ordered:  {dto.order_time}")
    click.echo()

    click.echo(f"  {'Line':<6} {'Product':<24} {'Qty':>5} {'Price':>10} {'VAT':>6} {'Total':>10}")
    click.echo(f"  {'-'*66}")
    for line in dto.lines:
        name = line.product_name
        if line.product_variant_name:
            name = f"{name} ({line.product_variant_name})"
        click.echo(
            f"  {line.id:<6} {name:<24} {line.quantity:>5} {line.price:>10} "
            f"{line.vat_percent + '%':>6} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Order Total':<31} {dto.total + ' ' + dto.currency:>35}")
    click.echo(f"  {'of which VAT':<31} {dto.total_vat + ' ' + dto.currency:>35}")


@click.command("list")
@click.option("--count", type=int, default=None, help="Maximum number of orders.")
@click.option("--offset", type=int, default=0, show_default=True, help="Orders to skip.")
@click.pass_obj
def order_list(settings: Settings, count: int | None, offset: int) -> None:
    """List orders, newest first."""
    try:
        orders = _service(settings).list_orders(count=count, offset=offset)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Customer':<24} {'Total':>12}")
    click.echo("-" * 55)
    for order in orders:
        click.echo(
            f"{order.id:<6} {order.status.name:<10} {order.customer_name:<24} "
            f"{order.total.amount:>12.2f}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    order = _service(settings).get_by_id(order_id)
    if order is None:
        raise click.ClickException(f"Order #{order_id} not found")
    _display_order(to_order_dto(order))


@click.command("for-event")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.pass_obj
def order_for_event(settings: Settings, event_id: int) -> None:
    """List the orders of an event by participant name."""
    orders = _service(settings).get_for_event(event_id)
    if not orders:
        click.echo("No orders found.")
        return
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {dto.participant_name or '':<24} "
            f"{dto.total:>12} {dto.currency}"
        )


@click.command("create")
@click.option("--registration", "registration_id", required=True, type=int, help="Registration ID.")
@click.option("--payment-method", "payment_method_id", type=int, default=None, help="Payment method ID.")
@click.pass_obj
def order_create(settings: Settings, registration_id: int, payment_method_id: int | None) -> None:
    """Open a draft order for a registration."""
    try:
        order = _service(settings).create_for_registration(registration_id, payment_method_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} created  (status={order.status.name})")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_obj
def order_delete(settings: Settings, order_id: int) -> None:
    """Delete an order that has not been invoiced."""
    try:
        _service(settings).delete_order_by_id(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")


@click.command("add-line")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--variant", "variant_id", type=int, default=None, help="Product variant ID.")
@click.pass_obj
def order_add_line(settings: Settings, order_id: int, product_id: int, variant_id: int | None) -> None:
    """Add a product (or one of its variants) to an order."""
    try:
        _service(settings).add_line(order_id, product_id, variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} added to order #{order_id}.")


@click.command("delete-line")
@click.option("--line", "line_id", required=True, type=int, help="Order line ID.")
@click.pass_obj
def order_delete_line(settings: Settings, line_id: int) -> None:
    """Remove a line from an editable order."""
    try:
        _service(settings).delete_line(line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line #{line_id} deleted.")


@click.command("update-line")
@click.option("--line", "line_id", required=True, type=int, help="Order line ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.option("--price", required=True, help="New unit price (e.g. 450.00).")
@click.pass_obj
def order_update_line(settings: Settings, line_id: int, quantity: int, price: str) -> None:
    """Change quantity and price of a line."""
    try:
        _service(settings).update_line(line_id, quantity, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line #{line_id} updated.")


@click.command("details")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--name", "customer_name", required=True, help="Customer name.")
@click.option("--email", "customer_email", required=True, help="Customer email.")
@click.option("--invoice-ref", "invoice_reference", default=None, help="Customer invoice reference.")
@click.option("--comments", default=None, help="Free-text comments.")
@click.pass_obj
def order_details(
    settings: Settings,
    order_id: int,
    customer_name: str,
    customer_email: str,
    invoice_reference: str | None,
    comments: str | None,
) -> None:
    """Overwrite the customer details of an order."""
    try:
        _service(settings).update_order_details(
            order_id, customer_name, customer_email, invoice_reference, comments
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} details updated.")


@click.command("free")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_free(settings: Settings, order_id: int) -> None:
    """Set every line price of an order to zero."""
    try:
        changed = _service(settings).make_order_free(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now free ({changed} line(s) changed).")


def _status_command(name: str, method: str, past: str, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--id", "order_id", required=True, type=int, help="Order ID.")
    @click.pass_obj
    def command(settings: Settings, order_id: int) -> None:
        try:
            getattr(_service(settings), method)(order_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"Order #{order_id} marked as {past}.")

    return command


order_verify = _status_command("verify", "mark_as_verified", "verified", "Mark an order as verified.")
order_invoice = _status_command("invoice", "mark_as_invoiced", "invoiced", "Mark an order as invoiced.")
order_cancel = _status_command("cancel", "mark_as_cancelled", "cancelled", "Cancel an order.")
