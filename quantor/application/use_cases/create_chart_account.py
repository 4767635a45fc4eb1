"""Use case for adding an account to a user's chart of accounts.

The next free code is minted from a freshly built tree and the account is
then inserted through the repository. Code generation reserves nothing, so two
concurrent creations under the same parent may mint the same code.
"""

from quantor.application.ports.chart_of_accounts_repository import (
    ChartAccountDraft,
    ChartOfAccountsRepositoryPort,
)
from quantor.domain.constants import (
    ACCOUNT_TYPES,
    CATEGORY_LEVEL,
    SUBCATEGORY_LEVEL,
)
from quantor.domain.models.accounts import AccountNode, AccountRecord
from quantor.domain.services.chart_of_accounts import ChartOfAccountsTree
from quantor.infrastructure.logging.logger import get_app_logger


class AccountCreationError(ValueError):
    """Raised when an account cannot be added at the requested position."""


class CreateChartAccountUseCase:
    """Create a category, subcategory or leaf account."""

    def __init__(
        self,
        repository: ChartOfAccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing chart-of-accounts storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        name: str,
        parent_id: int | None = None,
        account_type: str | None = None,
        description: str | None = None,
    ) -> AccountRecord:
        """Insert a new account under ``parent_id``.

        Args:
            user_id: Owner of the chart of accounts.
            name: Display name of the new account.
            parent_id: Parent account, or None for a new category.
            account_type: Required for categories; children inherit the
                parent's type when omitted.
            description: Optional free-text description.

        Returns:
            AccountRecord: The stored account.

        Raises:
            AccountCreationError: If the name is blank, the type is unknown,
                the parent does not exist or the parent is a leaf account.
        """
        clean_name = name.strip()
        if not clean_name:
            raise AccountCreationError("Account name must not be empty")

        tree = ChartOfAccountsTree(
            self._repository.fetch_accounts(user_id),
            logger=self._logger,
        )
        if parent_id is None:
            draft = self._category_draft(
                tree,
                user_id,
                clean_name,
                account_type,
                description,
            )
        else:
            parent = tree.find_node_by_id(parent_id)
            if parent is None:
                raise AccountCreationError(
                    f"Parent account {parent_id} does not exist"
                )
            if not tree.can_have_children(parent):
                raise AccountCreationError(
                    f"Account {parent.code} is a leaf and cannot have children"
                )
            draft = self._child_draft(
                tree,
                parent,
                user_id,
                clean_name,
                account_type,
                description,
            )

        account = self._repository.create_account(draft)
        self._logger.info(
            f"Created account {account.code} ({account.name}) "
            f"for user {user_id}"
        )
        return account

    @staticmethod
    def _check_type(account_type: str | None) -> str:
        if account_type not in ACCOUNT_TYPES:
            raise AccountCreationError(
                f"Unknown account type {account_type!r}; "
                f"expected one of {', '.join(ACCOUNT_TYPES)}"
            )
        return account_type

    def _category_draft(
        self,
        tree: ChartOfAccountsTree,
        user_id: str,
        name: str,
        account_type: str | None,
        description: str | None,
    ) -> ChartAccountDraft:
        return ChartAccountDraft(
            user_id=user_id,
            code=tree.generate_next_code(),
            name=name,
            account_type=self._check_type(account_type),
            level=CATEGORY_LEVEL,
            description=description,
            category=name,
        )

    def _child_draft(
        self,
        tree: ChartOfAccountsTree,
        parent: AccountNode,
        user_id: str,
        name: str,
        account_type: str | None,
        description: str | None,
    ) -> ChartAccountDraft:
        level = parent.level + 1
        if level == SUBCATEGORY_LEVEL:
            category, subcategory = parent.name, name
        else:
            category, subcategory = parent.category, parent.name
        return ChartAccountDraft(
            user_id=user_id,
            code=tree.generate_next_code(parent.id),
            name=name,
            account_type=self._check_type(account_type or parent.account_type),
            level=level,
            parent_id=parent.id,
            description=description,
            category=category,
            subcategory=subcategory,
        )


__all__ = ["CreateChartAccountUseCase", "AccountCreationError"]
