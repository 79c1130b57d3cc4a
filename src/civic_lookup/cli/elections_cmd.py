"""Election and voter information CLI commands."""

import asyncio

import typer

from civic_lookup.core.config import get_settings
from civic_lookup.lib.civic.client import CivicApiError, CivicInfoClient
from civic_lookup.lib.civic.filters import ElectionTab
from civic_lookup.services.election_service import get_voter_info_view, list_elections

elections_app = typer.Typer()


@elections_app.command("list")
def list_cmd(
    query: str = typer.Option("", "--search", "-s", help="Filter by election name"),
    tab: ElectionTab = typer.Option(ElectionTab.ALL, "--tab", help="Election list tab"),
) -> None:
    """List elections known to the civic information service."""
    asyncio.run(_list_elections(query, tab))


async def _list_elections(query: str, tab: ElectionTab) -> None:
    client = CivicInfoClient.from_settings(get_settings())
    try:
        elections = await list_elections(client, query=query, tab=tab)
    except CivicApiError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        await client.close()

    if not elections:
        typer.echo("No elections found.")
        return
    for election in elections:
        typer.echo(f"{election.id:>6}  {election.election_day_display:<20}  {election.level:<8}  {election.name}")


@elections_app.command("voter-info")
def voter_info(
    address: str = typer.Option(..., "--address", help="Registered voting address"),
    election_id: str | None = typer.Option(None, "--election-id", help="Election id (defaults to the next one)"),
) -> None:
    """Show polling locations and contests for an address."""
    asyncio.run(_voter_info(address, election_id))


async def _voter_info(address: str, election_id: str | None) -> None:
    client = CivicInfoClient.from_settings(get_settings())
    try:
        view = await get_voter_info_view(client, address, election_id)
    except CivicApiError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        await client.close()

    if view is None:
        typer.echo("No voter information is available for this address.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{view.election_name} ({view.election_day_display})")
    if view.administration is not None:
        if view.administration.name:
            typer.echo(view.administration.name)
        for link in view.administration.links:
            typer.echo(f"  {link.label}: {link.url}")

    for heading, locations in (
        ("Polling locations", view.polling_locations),
        ("Early voting", view.early_vote_sites),
        ("Drop-off locations", view.drop_off_locations),
    ):
        if not locations:
            continue
        typer.echo(f"\n{heading}:")
        for location in locations:
            typer.echo(f"  {location.name}")
            for line in location.address.splitlines():
                typer.echo(f"    {line}")
            if location.hours:
                typer.echo(f"    Hours: {location.hours}")

    if view.contests:
        typer.echo("\nContests:")
        for contest in view.contests:
            typer.echo(f"  [{contest.label}] {contest.title}")
            for candidate in contest.candidates:
                party = f" ({candidate.party})" if candidate.party else ""
                typer.echo(f"    - {candidate.name}{party}")

