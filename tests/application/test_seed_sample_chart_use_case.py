"""Tests for the SeedSampleChartUseCase."""

from unittest.mock import MagicMock

import pytest

from quantor.application.use_cases.seed_sample_chart import (
    SeedSampleChartUseCase,
)
from quantor.domain.models.accounts import AccountRecord
from quantor.domain.services.chart_of_accounts import ChartOfAccountsTree


def test_seeds_sample_chart_with_remapped_parents(make_repository) -> None:
    """Parents are inserted first and children point at stored ids."""
    repository = make_repository()
    use_case = SeedSampleChartUseCase(
        repository=repository,
        logger=MagicMock(),
    )

    result = use_case.execute("9")

    assert repository.prepared is True
    assert result.inserted_count == 12
    assert result.existing_count == 0
    assert [draft.code for draft in repository.created][:4] == [
        "1",
        "1.1",
        "1.1.001",
        "1.1.002",
    ]

    tree = ChartOfAccountsTree(repository.fetch_accounts("9"))
    sales = next(
        node
        for node in tree.get_flattened_nodes()
        if node.code == "1.1.001"
    )
    assert tree.get_node_path(sales.id) == (
        "Receitas > Receitas Operacionais > Vendas de Produtos"
    )
    assert all(draft.user_id == "9" for draft in repository.created)


def test_skips_users_that_already_have_accounts(make_repository) -> None:
    existing = AccountRecord(
        id=1,
        code="1",
        name="Receitas",
        account_type="receita",
        level=1,
    )
    repository = make_repository({"9": [existing]})
    logger = MagicMock()
    use_case = SeedSampleChartUseCase(repository=repository, logger=logger)

    result = use_case.execute("9")

    assert result.inserted_count == 0
    assert result.existing_count == 1
    assert repository.created == []
    logger.warning.assert_called_once()


def test_seeds_custom_template(make_repository) -> None:
    template = [
        AccountRecord(
            id=50,
            code="1.1",
            name="Salário",
            account_type="receita",
            level=2,
            parent_id=40,
        ),
        AccountRecord(
            id=40,
            code="1",
            name="Receitas",
            account_type="receita",
            level=1,
        ),
    ]
    repository = make_repository()
    use_case = SeedSampleChartUseCase(
        repository=repository,
        logger=MagicMock(),
        template=template,
    )

    use_case.execute("3")

    parent, child = repository.fetch_accounts("3")
    assert child.parent_id == parent.id
    assert parent.id != 40


def test_failed_seed_leaves_no_rows(make_repository) -> None:
    """An insert failing midway must not strand a partial chart."""
    repository = make_repository()
    repository.fail_on_insert = 5
    use_case = SeedSampleChartUseCase(
        repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(RuntimeError):
        use_case.execute("9")

    assert repository.fetch_accounts("9") == []

    repository.fail_on_insert = None
    result = use_case.execute("9")

    assert result.existing_count == 0
    assert result.inserted_count == 12
    assert len(repository.fetch_accounts("9")) == 12
