from __future__ import annotations

import dataclasses
from pathlib import Path

import click
import uvicorn

from eventmgmt.infrastructure.api.app import create_app
from eventmgmt.infrastructure.cli.event_commands import event_list, event_participants
from eventmgmt.infrastructure.cli.order_commands import (
    order_add_line,
    order_cancel,
    order_create,
    order_delete,
    order_delete_line,
    order_details,
    order_for_event,
    order_free,
    order_invoice,
    order_list,
    order_show,
    order_update_line,
    order_verify,
)
from eventmgmt.infrastructure.cli.registration_commands import registration_attendance
from eventmgmt.infrastructure.config import Settings
from eventmgmt.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory of the JSON store (overrides EVENTMGMT_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Event management: orders, registrations and attendance"""
    settings = Settings.from_env()
    if data_dir is not None:
        settings = dataclasses.replace(settings, data_dir=data_dir)
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def event() -> None:
    """Browse events."""


@cli.group()
def registration() -> None:
    """Manage registrations."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.pass_obj
def serve(settings: Settings, host: str, port: int) -> None:
    """Serve the HTTP API."""
    uvicorn.run(create_app(settings), host=host, port=port)


# Register subcommands
order.add_command(order_add_line)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_delete_line)
order.add_command(order_details)
order.add_command(order_for_event)
order.add_command(order_free)
order.add_command(order_invoice)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update_line)
order.add_command(order_verify)
event.add_command(event_list)
event.add_command(event_participants)
registration.add_command(registration_attendance)
