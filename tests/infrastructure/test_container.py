"""Tests for the composition root."""

from quantor.infrastructure import container
from quantor.infrastructure.chart_of_accounts_repository import (
    SqlAlchemyChartOfAccountsRepository,
)
from quantor.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


def test_build_database_adapter() -> None:
    adapter = container.build_database_adapter()

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_build_repository_uses_given_port() -> None:
    db_port = object()

    repository = container.build_chart_of_accounts_repository(db_port)

    assert isinstance(repository, SqlAlchemyChartOfAccountsRepository)
    assert repository._db_port is db_port


def test_build_repository_defaults_to_sqlalchemy_adapter() -> None:
    repository = container.build_chart_of_accounts_repository()

    assert isinstance(repository._db_port, SqlAlchemyDatabaseEngineAdapter)
