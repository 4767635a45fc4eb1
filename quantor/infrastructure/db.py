"""SQLAlchemy engine for the Quantor ledger database.

The chart-of-accounts repository reaches PostgreSQL through one lazily
created engine. Its URL comes from ``QUANTOR_DB_URL``, read from the process
environment or from a ``.env`` file in the working directory.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from quantor.application.ports.database import DatabaseEnginePort


DB_URL_ENV_VAR = "QUANTOR_DB_URL"

POOL_SIZE = 5
POOL_MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return the setting ``name``, loading ``.env`` first.

    Raises:
        RuntimeError: If the setting is unset or blank, naming the variable
            so the operator knows what to add to ``.env``.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the ledger engine for ``db_url``.

    Connections are pooled and pinged before use, so a PostgreSQL restart
    between two CLI calls does not surface as a stale-connection error.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=POOL_SIZE,
        max_overflow=POOL_MAX_OVERFLOW,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_env_var(DB_URL_ENV_VAR))
    return _engine


def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine.

    The next ``get_engine`` call re-reads ``QUANTOR_DB_URL``.
    """
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort serving the shared ledger engine."""

    def get_engine(self) -> Engine:
        return get_engine()


__all__ = [
    "DB_URL_ENV_VAR",
    "dispose_engine",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
