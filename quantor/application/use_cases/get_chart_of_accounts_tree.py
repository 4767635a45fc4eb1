"""Use case to load a user's chart of accounts as a navigable tree."""

from quantor.application.ports.chart_of_accounts_repository import (
    ChartOfAccountsRepositoryPort,
)
from quantor.domain.services.chart_of_accounts import ChartOfAccountsTree
from quantor.infrastructure.logging.logger import get_app_logger


class GetChartOfAccountsTreeUseCase:
    """Fetch a user's accounts and build the hierarchy."""

    def __init__(
        self,
        repository: ChartOfAccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing chart-of-accounts rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> ChartOfAccountsTree:
        """Return the tree built from the user's current accounts."""
        records = self._repository.fetch_accounts(user_id)
        self._logger.info(
            f"Building chart of accounts for user {user_id} "
            f"from {len(records)} accounts"
        )
        return ChartOfAccountsTree(records, logger=self._logger)


__all__ = ["GetChartOfAccountsTreeUseCase"]
