"""Port for reading and writing a user's chart of accounts."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from quantor.domain.models.accounts import AccountRecord


@dataclass(frozen=True)
class ChartAccountDraft:
    """Account waiting to be inserted; the id is assigned by storage."""

    user_id: str
    code: str
    name: str
    account_type: str
    level: int
    parent_id: int | None = None
    is_active: bool = True
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None


class ChartOfAccountsRepositoryPort(Protocol):
    """Port exposing chart-of-accounts storage."""

    def prepare_storage(self) -> None:
        """Ensure the chart-of-accounts table exists."""

    def fetch_accounts(self, user_id: str) -> list[AccountRecord]:
        """Return every account owned by ``user_id``, ordered by code."""

    def fetch_account(self, account_id: int) -> AccountRecord | None:
        """Return one account, or None when it does not exist."""

    def create_account(self, draft: ChartAccountDraft) -> AccountRecord:
        """Insert ``draft`` and return the stored record."""

    def create_accounts(
        self,
        drafts: Mapping[int, ChartAccountDraft],
    ) -> dict[int, AccountRecord]:
        """Insert a batch of related accounts in a single transaction.

        Keys are batch-local ids. A draft's ``parent_id`` names another key
        of ``drafts`` listed before it, or is None for a category. Either
        every draft is stored or none is.

        Returns:
            dict[int, AccountRecord]: Stored records keyed by batch-local id.
        """

    def update_account(
        self,
        account_id: int,
        changes: dict[str, Any],
    ) -> AccountRecord | None:
        """Apply ``changes`` and return the updated record, if any."""

    def delete_account(self, account_id: int) -> None:
        """Delete one account."""


__all__ = ["ChartAccountDraft", "ChartOfAccountsRepositoryPort"]
