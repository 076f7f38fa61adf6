"""CLI commands for events and their participants."""

from __future__ import annotations

import click

from eventmgmt.domain.exceptions import DomainException
from eventmgmt.infrastructure.bootstrap import build_container
from eventmgmt.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def event_list(settings: Settings) -> None:
    """List all events by start date."""
    events = build_container(settings).list_events().handle()

    if not events:
        click.echo("No events found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'City':<16} {'Starts':<10}")
    click.echo("-" * 65)
    for e in events:
        starts = e.date_start.isoformat() if e.date_start else "-"
        click.echo(f"{e.id:<6} {e.title:<30} {e.city or '-':<16} {starts:<10}")


@click.command("participants")
@click.option("--id", "event_id", required=True, type=int, help="Event ID.")
@click.pass_obj
def event_participants(settings: Settings, event_id: int) -> None:
    """List the participants of an event with their attendance."""
    try:
        result = build_container(settings).list_participants().handle(event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.kind == "empty":
        click.echo("No participants.")
        return

    click.echo(f"{'Reg':<6} {'Name':<24} {'Email':<28} {'Attended':<8}")
    click.echo("-" * 69)
    for p in result.items:
        click.echo(
            f"{p.registration_id:<6} {p.name:<24} {p.email or '-':<28} "
            f"{'yes' if p.attended else 'no':<8}"
        )
