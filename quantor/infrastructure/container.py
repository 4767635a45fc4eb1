"""Composition root for wiring infrastructure adapters."""

from quantor.application.ports.chart_of_accounts_repository import (
    ChartOfAccountsRepositoryPort,
)
from quantor.application.ports.database import DatabaseEnginePort
from quantor.infrastructure.chart_of_accounts_repository import (
    SqlAlchemyChartOfAccountsRepository,
)
from quantor.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from quantor.infrastructure.settings import QuantorSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_chart_of_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ChartOfAccountsRepositoryPort:
    """Return the chart-of-accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyChartOfAccountsRepository(resolved_db)


def build_settings() -> QuantorSettings:
    """Return settings sourced from the environment."""
    return QuantorSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_chart_of_accounts_repository",
    "build_settings",
]
