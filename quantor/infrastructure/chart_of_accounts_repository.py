"""SQLAlchemy-backed repository for the chart_of_accounts table."""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from sqlalchemy import text

from quantor.application.ports.chart_of_accounts_repository import (
    ChartAccountDraft,
    ChartOfAccountsRepositoryPort,
)
from quantor.application.ports.database import DatabaseEnginePort
from quantor.domain.models.accounts import AccountRecord


CREATE_CHART_OF_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS chart_of_accounts (
    id SERIAL PRIMARY KEY,
    user_id TEXT NOT NULL,
    parent_id INTEGER REFERENCES chart_of_accounts (id),
    code TEXT NOT NULL,
    name TEXT NOT NULL,
    type TEXT NOT NULL,
    level INTEGER NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    category TEXT,
    subcategory TEXT,
    description TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

_SELECT_COLUMNS = """
    id, code, name, type AS account_type, level, parent_id, is_active,
    description, category, subcategory
"""

SELECT_ACCOUNTS_SQL = text(
    f"""
    SELECT {_SELECT_COLUMNS}
    FROM chart_of_accounts
    WHERE user_id = :user_id
    ORDER BY code
    """
)

SELECT_ACCOUNT_SQL = text(
    f"""
    SELECT {_SELECT_COLUMNS}
    FROM chart_of_accounts
    WHERE id = :id
    """
)

INSERT_ACCOUNT_SQL = text(
    f"""
    INSERT INTO chart_of_accounts (
        user_id,
        parent_id,
        code,
        name,
        type,
        level,
        is_active,
        category,
        subcategory,
        description
    )
    VALUES (
        :user_id,
        :parent_id,
        :code,
        :name,
        :account_type,
        :level,
        :is_active,
        :category,
        :subcategory,
        :description
    )
    RETURNING {_SELECT_COLUMNS}
    """
)

DELETE_ACCOUNT_SQL = text("DELETE FROM chart_of_accounts WHERE id = :id")

# Attribute name -> column name for partial updates.
UPDATABLE_COLUMNS = {
    "parent_id": "parent_id",
    "code": "code",
    "name": "name",
    "account_type": "type",
    "level": "level",
    "is_active": "is_active",
    "category": "category",
    "subcategory": "subcategory",
    "description": "description",
}


def _row_to_record(row) -> AccountRecord:
    """Map a result row onto an AccountRecord."""
    return AccountRecord(
        id=row.id,
        code=row.code,
        name=row.name,
        account_type=row.account_type,
        level=row.level,
        parent_id=row.parent_id,
        is_active=bool(row.is_active),
        description=row.description,
        category=row.category,
        subcategory=row.subcategory,
    )


class SqlAlchemyChartOfAccountsRepository(ChartOfAccountsRepositoryPort):
    """Repository backed by SQLAlchemy for chart_of_accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the application engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the chart_of_accounts table exists."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_CHART_OF_ACCOUNTS_SQL)

    def fetch_accounts(self, user_id: str) -> list[AccountRecord]:
        """Return the accounts owned by ``user_id`` ordered by code."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACCOUNTS_SQL,
                {"user_id": user_id},
            ).all()
        return [_row_to_record(row) for row in rows]

    def fetch_account(self, account_id: int) -> AccountRecord | None:
        """Return the account with ``account_id`` or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_SQL,
                {"id": account_id},
            ).first()
        return _row_to_record(row) if row is not None else None

    def create_account(self, draft: ChartAccountDraft) -> AccountRecord:
        """Insert ``draft`` and return the stored record.

        Args:
            draft: Account values without an id.

        Returns:
            AccountRecord: Stored account including its generated id.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            row = conn.execute(INSERT_ACCOUNT_SQL, asdict(draft)).one()
        return _row_to_record(row)

    def create_accounts(
        self,
        drafts: Mapping[int, ChartAccountDraft],
    ) -> dict[int, AccountRecord]:
        """Insert related accounts inside one transaction.

        Args:
            drafts: Drafts keyed by batch-local id, parents first. A
                non-null ``parent_id`` is a key of ``drafts``.

        Returns:
            dict[int, AccountRecord]: Stored records keyed by batch-local id.

        Raises:
            ValueError: If a draft names a parent not inserted before it.
                Nothing from the batch is kept.
        """
        stored: dict[int, AccountRecord] = {}
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            for local_id, draft in drafts.items():
                values = asdict(draft)
                if draft.parent_id is not None:
                    parent = stored.get(draft.parent_id)
                    if parent is None:
                        raise ValueError(
                            f"Draft {local_id} ({draft.code}) references "
                            f"parent {draft.parent_id} outside the batch"
                        )
                    values["parent_id"] = parent.id
                row = conn.execute(INSERT_ACCOUNT_SQL, values).one()
                stored[local_id] = _row_to_record(row)
        return stored

    def update_account(
        self,
        account_id: int,
        changes: dict[str, Any],
    ) -> AccountRecord | None:
        """Apply a partial update to one account.

        Args:
            account_id: Id of the account to update.
            changes: Attribute names mapped to new values.

        Returns:
            AccountRecord | None: Updated record, or None when no row matched.

        Raises:
            ValueError: If ``changes`` names an attribute that cannot be
                updated.
        """
        unknown = sorted(set(changes) - set(UPDATABLE_COLUMNS))
        if unknown:
            raise ValueError(
                f"Cannot update account fields: {', '.join(unknown)}"
            )
        if not changes:
            return self.fetch_account(account_id)

        assignments = ", ".join(
            f"{UPDATABLE_COLUMNS[field]} = :{field}" for field in changes
        )
        statement = text(
            f"""
            UPDATE chart_of_accounts
            SET {assignments}
            WHERE id = :id
            RETURNING {_SELECT_COLUMNS}
            """
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            row = conn.execute(
                statement,
                {**changes, "id": account_id},
            ).first()
        return _row_to_record(row) if row is not None else None

    def delete_account(self, account_id: int) -> None:
        """Delete the account with ``account_id``."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_ACCOUNT_SQL, {"id": account_id})


__all__ = [
    "SqlAlchemyChartOfAccountsRepository",
    "CREATE_CHART_OF_ACCOUNTS_SQL",
    "SELECT_ACCOUNTS_SQL",
    "SELECT_ACCOUNT_SQL",
    "INSERT_ACCOUNT_SQL",
    "DELETE_ACCOUNT_SQL",
    "UPDATABLE_COLUMNS",
]
