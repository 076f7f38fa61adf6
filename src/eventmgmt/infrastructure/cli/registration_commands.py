"""CLI commands for registrations."""

from __future__ import annotations

import click

from eventmgmt.domain.exceptions import DomainException
from eventmgmt.infrastructure.bootstrap import build_container
from eventmgmt.infrastructure.config import Settings


@click.command("attendance")
@click.option("--id", "registration_id", required=True, type=int, help="Registration ID.")
@click.option(
    "--attended/--absent",
    default=None,
    help="Record attendance. Without either flag the current value is shown.",
)
@click.pass_obj
def registration_attendance(settings: Settings, registration_id: int, attended: bool | None) -> None:
    """Show or set whether a participant attended."""
    service = build_container(settings).attendance_service()

    try:
        if attended is None:
            value = service.get(registration_id)
        else:
            value = service.set(registration_id, attended)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Registration #{registration_id} attended: {'yes' if value else 'no'}")
