"""Typer CLI root application with serve command."""

import typer

from civic_lookup.core.config import get_settings
from civic_lookup.core.logging import setup_logging

app = typer.Typer(name="civic-lookup", help="Electoral district, election and voter registration lookup CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "civic_lookup.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from civic_lookup.cli.db_cmd import db_app
    from civic_lookup.cli.elections_cmd import elections_app
    from civic_lookup.cli.lookup_cmd import lookup_app
    from civic_lookup.cli.registration_cmd import registration_app
    from civic_lookup.cli.user_cmd import user_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(user_app, name="user", help="User management commands")
    app.add_typer(lookup_app, name="lookup", help="Electoral district lookup commands")
    app.add_typer(elections_app, name="elections", help="Election and voter information commands")
    app.add_typer(registration_app, name="registration", help="Voter registration directory commands")


_register_subcommands()
