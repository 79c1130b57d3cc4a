"""Shared fixtures for CLI command tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from civic_lookup.core.config import Settings


@pytest.fixture
def cli_settings(tmp_path: Path) -> Settings:
    """Settings with the local store redirected into the test's tmp dir."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="test-secret-key-not-for-production",
        civic_api_key="test-civic-key",
        local_store_path=str(tmp_path / "storage.json"),
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture(autouse=True)
def _cli_environment(cli_settings: Settings) -> Generator[None]:
    """Keep the root callback from reading the environment or touching log sinks."""
    with (
        patch("civic_lookup.cli.app.get_settings", return_value=cli_settings),
        patch("civic_lookup.cli.app.setup_logging"),
    ):
        yield
