"""Voter registration directory CLI commands."""

import typer

from civic_lookup.lib.registration import UnknownStateError, get_state, list_states

registration_app = typer.Typer()


@registration_app.command("list")
def list_cmd() -> None:
    """List every state and territory in the directory."""
    for entry in list_states():
        typer.echo(f"{entry.code}  {entry.name}")


@registration_app.command("show")
def show(
    state: str = typer.Argument(..., help="Postal code or full name, e.g. WA or Washington"),
) -> None:
    """Show registration links and deadlines for a state."""
    try:
        entry = get_state(state)
    except UnknownStateError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"{entry.name} ({entry.code})")
    typer.echo(f"  Check registration:    {entry.status_url}")
    typer.echo(f"  Register to vote:      {entry.registration_url}")
    typer.echo(f"  Registration deadline: {entry.deadline}")
    typer.echo(f"  Absentee deadline:     {entry.absentee_deadline}")
    typer.echo(f"  Early voting:          {entry.early_voting}")
