"""CLI adapter printing a chart of accounts as an indented tree.

The chart of the user named by ``QUANTOR_USER_ID`` is read from the database,
or the built-in sample chart when ``QUANTOR_USE_SAMPLE`` is set.
"""

from quantor.application.use_cases.get_chart_of_accounts_tree import (
    GetChartOfAccountsTreeUseCase,
)
from quantor.domain.models.accounts import AccountNode
from quantor.domain.sample_data import SAMPLE_CHART_OF_ACCOUNTS
from quantor.domain.services.chart_of_accounts import ChartOfAccountsTree
from quantor.infrastructure.container import (
    build_chart_of_accounts_repository,
    build_settings,
)
from quantor.infrastructure.logging.logger import get_app_logger

# Pixels of UI indentation rendered as one space.
PIXELS_PER_SPACE = 10


def format_node(tree: ChartOfAccountsTree, node: AccountNode) -> str:
    """Render one tree row.

    Args:
        tree: Tree the node belongs to.
        node: Node to render.

    Returns:
        str: Indented ``code name`` line, with inactive accounts flagged.
    """
    indent = " " * (tree.get_indentation_level(node) // PIXELS_PER_SPACE)
    suffix = "" if node.is_active else " (inactive)"
    return f"{indent}{node.code} {node.name}{suffix}"


def main() -> None:
    """Print the configured chart of accounts."""
    logger = get_app_logger()
    settings = build_settings()

    if settings.use_sample_data:
        tree = ChartOfAccountsTree(SAMPLE_CHART_OF_ACCOUNTS, logger=logger)
        source = "sample chart"
    else:
        use_case = GetChartOfAccountsTreeUseCase(
            repository=build_chart_of_accounts_repository(),
            logger=logger,
        )
        tree = use_case.execute(settings.user_id)
        source = f"user {settings.user_id}"

    nodes = tree.get_flattened_nodes()
    if not nodes:
        print(f"No accounts found for {source}.")
        return
    for node in nodes:
        print(format_node(tree, node))
    print(f"{len(nodes)} accounts in {source}.")


if __name__ == "__main__":  # pragma: no cover
    main()
