"""Async engine and session factory shared by the API, CLI and migrations.

``init_engine`` must run before ``get_engine``/``get_session_factory``; the
FastAPI lifespan and each database-backed CLI command call it and pair it with
``dispose_engine``.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None

_POOL_DEFAULTS = {"pool_size": 10, "max_overflow": 5}


def get_engine() -> AsyncEngine:
    """Return the current async engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the current session factory.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        msg = "Session factory not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _session_factory


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    # user_districts rows cascade with their user; SQLite only enforces that per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _with_search_path(kwargs: dict[str, Any], schema: str) -> None:
    connect_args = kwargs.pop("connect_args", {})
    if not isinstance(connect_args, dict):
        msg = "connect_args must be a dict"
        raise TypeError(msg)
    connect_args["server_settings"] = {"search_path": f"{schema},public"}
    kwargs["connect_args"] = connect_args


def init_engine(database_url: str, *, schema: str | None = None, **kwargs: Any) -> AsyncEngine:
    """Create and store the async engine and session factory.

    Args:
        database_url: Async SQLAlchemy URL (``postgresql+asyncpg://`` in
            deployments, ``sqlite+aiosqlite://`` for local use and tests).
        schema: PostgreSQL schema placed first on the asyncpg ``search_path``;
            ignored for SQLite.
        **kwargs: Passed through to ``create_async_engine``.
    """
    global _engine, _session_factory  # noqa: PLW0603
    is_sqlite = database_url.startswith("sqlite")

    if schema is not None and not is_sqlite:
        _with_search_path(kwargs, schema)
    if not is_sqlite and "poolclass" not in kwargs:
        for key, value in _POOL_DEFAULTS.items():
            kwargs.setdefault(key, value)

    engine = create_async_engine(database_url, **kwargs)
    if is_sqlite and engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    _engine = engine
    _session_factory = async_sessionmaker(engine, expire_on_commit=False)
    return engine


async def dispose_engine() -> None:
    """Dispose of the engine, if any, and forget the session factory."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
