"""Use case that seeds the demonstration chart of accounts for a user."""

from collections.abc import Sequence
from dataclasses import dataclass

from quantor.application.ports.chart_of_accounts_repository import (
    ChartAccountDraft,
    ChartOfAccountsRepositoryPort,
)
from quantor.domain.models.accounts import AccountRecord
from quantor.domain.sample_data import SAMPLE_CHART_OF_ACCOUNTS
from quantor.domain.services.chart_of_accounts import ChartOfAccountsTree
from quantor.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedSampleChartResult:
    """Result of a seeding run.

    Attributes:
        existing_count: Accounts the user already had.
        inserted_count: Accounts inserted by this run.
    """

    existing_count: int
    inserted_count: int


class SeedSampleChartUseCase:
    """Insert a template chart for a user who has no accounts yet.

    Template ids are local to the template. The whole chart is written in one
    batch, parents first, and children are remapped onto the ids assigned by
    storage; a failed insert leaves the user with no accounts, so the seed
    can simply be run again.
    """

    def __init__(
        self,
        repository: ChartOfAccountsRepositoryPort,
        logger=None,
        template: Sequence[AccountRecord] = SAMPLE_CHART_OF_ACCOUNTS,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing chart-of-accounts storage.
            logger: Optional logger compatible with logging.Logger-like API.
            template: Records to copy; defaults to the sample chart.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._template = template

    def execute(self, user_id: str) -> SeedSampleChartResult:
        """Seed the template for ``user_id`` unless it already has accounts."""
        self._repository.prepare_storage()
        existing = self._repository.fetch_accounts(user_id)
        if existing:
            self._logger.warning(
                f"User {user_id} already has {len(existing)} accounts; "
                f"skipping sample chart"
            )
            return SeedSampleChartResult(
                existing_count=len(existing),
                inserted_count=0,
            )

        tree = ChartOfAccountsTree(self._template, logger=self._logger)
        drafts = {
            node.id: ChartAccountDraft(
                user_id=user_id,
                code=node.code,
                name=node.name,
                account_type=node.account_type,
                level=node.level,
                parent_id=node.parent_id,
                is_active=node.is_active,
                description=node.description,
                category=node.category,
                subcategory=node.subcategory,
            )
            for node in tree.get_flattened_nodes()
        }
        stored = self._repository.create_accounts(drafts)

        self._logger.info(
            f"Seeded {len(stored)} sample accounts for user {user_id}"
        )
        return SeedSampleChartResult(
            existing_count=0,
            inserted_count=len(stored),
        )


__all__ = ["SeedSampleChartUseCase", "SeedSampleChartResult"]
