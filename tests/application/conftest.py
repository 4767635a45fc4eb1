"""Shared fixtures for application tests."""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

import pytest

from quantor.application.ports.chart_of_accounts_repository import (
    ChartAccountDraft,
)
from quantor.domain.models.accounts import AccountRecord


class InMemoryChartOfAccountsRepository:
    """Repository storing records in a dict, assigning sequential ids."""

    def __init__(self, accounts: dict[str, list[AccountRecord]] | None = None):
        self.accounts: dict[str, list[AccountRecord]] = {
            user_id: list(records)
            for user_id, records in (accounts or {}).items()
        }
        self.prepared = False
        self.created: list[ChartAccountDraft] = []
        self._next_id = 100
        self.fail_on_insert: int | None = None

    def prepare_storage(self) -> None:
        self.prepared = True

    def fetch_accounts(self, user_id: str) -> list[AccountRecord]:
        return sorted(
            self.accounts.get(user_id, []),
            key=lambda record: record.code,
        )

    def fetch_account(self, account_id: int) -> AccountRecord | None:
        for records in self.accounts.values():
            for record in records:
                if record.id == account_id:
                    return record
        return None

    def create_account(self, draft: ChartAccountDraft) -> AccountRecord:
        self.created.append(draft)
        values = asdict(draft)
        user_id = values.pop("user_id")
        record = AccountRecord(id=self._next_id, **values)
        self._next_id += 1
        self.accounts.setdefault(user_id, []).append(record)
        return record

    def create_accounts(
        self,
        drafts: Mapping[int, ChartAccountDraft],
    ) -> dict[int, AccountRecord]:
        """Store every draft or none of them."""
        staged: dict[int, AccountRecord] = {}
        next_id = self._next_id
        for position, (local_id, draft) in enumerate(drafts.items(), 1):
            if position == self.fail_on_insert:
                raise RuntimeError(f"insert {position} failed")
            values = asdict(draft)
            values.pop("user_id")
            if draft.parent_id is not None:
                values["parent_id"] = staged[draft.parent_id].id
            staged[local_id] = AccountRecord(id=next_id, **values)
            next_id += 1

        self._next_id = next_id
        for local_id, draft in drafts.items():
            self.created.append(draft)
            self.accounts.setdefault(draft.user_id, []).append(
                staged[local_id]
            )
        return staged

    def update_account(
        self,
        account_id: int,
        changes: dict[str, Any],
    ) -> AccountRecord | None:
        raise NotImplementedError

    def delete_account(self, account_id: int) -> None:
        raise NotImplementedError


@pytest.fixture
def make_repository():
    """Return a factory for in-memory chart-of-accounts repositories."""
    return InMemoryChartOfAccountsRepository
