"""Electoral district lookup CLI commands.

Results are cached in the local JSON store (``LOCAL_STORE_PATH``).  With
``--save-for USERNAME`` they are also saved to that user's account in the
database.
"""

import asyncio
from collections.abc import Awaitable, Callable

import typer

from civic_lookup.core.config import get_settings
from civic_lookup.lib.civic.client import CivicInfoClient
from civic_lookup.lib.districts.types import AddressInput, DistrictRecord
from civic_lookup.lib.geocoder.base import Coordinates
from civic_lookup.lib.geocoder.census import CensusGeocoder
from civic_lookup.lib.lookup import (
    USER_DISTRICTS_KEY,
    DistrictLookup,
    JsonFileKeyValueStore,
    LookupResult,
    PositionProvider,
    StaticPositionProvider,
)

lookup_app = typer.Typer()

_SAVE_FOR_OPTION = typer.Option(None, "--save-for", help="Also store the result for this username")


def _print_record(record: DistrictRecord) -> None:
    for heading, value in record.labelled():
        typer.echo(f"{heading}: {value}")


@lookup_app.command("address")
def lookup_address(
    street: str = typer.Option("", "--street", help="Street address"),
    city: str = typer.Option("", "--city", help="City"),
    state: str = typer.Option("", "--state", help="State (e.g. WA)"),
    zip_code: str = typer.Option("", "--zip", help="ZIP code"),
    save_for: str | None = _SAVE_FOR_OPTION,
) -> None:
    """Look up districts for a street address."""
    address = AddressInput(street=street, city=city, state=state, zip=zip_code)
    asyncio.run(
        _run_lookup(
            StaticPositionProvider(None),
            save_for,
            lambda lookup, user_id: lookup.lookup_by_address(address, user_id=user_id),
        )
    )


@lookup_app.command("locate")
def lookup_location(
    lat: float = typer.Option(..., "--lat", min=-90, max=90, help="Latitude"),
    lon: float = typer.Option(..., "--lon", min=-180, max=180, help="Longitude"),
    save_for: str | None = _SAVE_FOR_OPTION,
) -> None:
    """Look up districts for a coordinate pair."""
    position = StaticPositionProvider(Coordinates(lat, lon))
    asyncio.run(
        _run_lookup(position, save_for, lambda lookup, user_id: lookup.lookup_by_geolocation(user_id=user_id))
    )


@lookup_app.command("show")
def show() -> None:
    """Show the districts cached by the last successful lookup."""
    store = JsonFileKeyValueStore(get_settings().local_store_path)
    data = store.get(USER_DISTRICTS_KEY)
    record = DistrictRecord.from_dict(data) if isinstance(data, dict) else None
    if record is None or record.is_empty():
        typer.echo("No districts cached. Run 'civic-lookup lookup address' first.")
        raise typer.Exit(code=1)
    _print_record(record)


@lookup_app.command("clear")
def clear() -> None:
    """Forget the locally cached districts."""
    JsonFileKeyValueStore(get_settings().local_store_path).delete(USER_DISTRICTS_KEY)
    typer.echo("Cached districts cleared.")


async def _run_lookup(
    position: PositionProvider,
    save_for: str | None,
    action: Callable[[DistrictLookup, str | None], Awaitable[LookupResult]],
) -> None:
    """Wire a DistrictLookup from settings, run ``action`` and report the result."""
    from sqlalchemy import select

    from civic_lookup.core.database import dispose_engine, get_session_factory, init_engine
    from civic_lookup.models.user import User
    from civic_lookup.services.district_service import SqlDistrictStore

    settings = get_settings()
    civic = CivicInfoClient.from_settings(settings)
    geocoder = CensusGeocoder(timeout=settings.geocoder_census_timeout)
    local_store = JsonFileKeyValueStore(settings.local_store_path)

    try:
        if save_for is None:
            lookup = DistrictLookup(civic, geocoder, position, local_store)
            result = await action(lookup, None)
        else:
            init_engine(settings.database_url, schema=settings.database_schema)
            try:
                async with get_session_factory()() as session:
                    found = await session.execute(select(User).where(User.username == save_for))
                    user = found.scalar_one_or_none()
                    if user is None:
                        typer.echo(f"Error: no such user '{save_for}'", err=True)
                        raise typer.Exit(code=1)
                    lookup = DistrictLookup(civic, geocoder, position, local_store, SqlDistrictStore(session))
                    result = await action(lookup, str(user.id))
            finally:
                await dispose_engine()
    finally:
        await civic.close()

    if result.record is None:
        typer.echo(f"Error: {result.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.message)
    _print_record(result.record)
