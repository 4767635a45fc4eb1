"""Domain models for chart-of-accounts entries."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccountRecord:
    """Flat chart-of-accounts row as supplied by the persistence layer."""

    id: int
    code: str
    name: str
    account_type: str
    level: int
    parent_id: int | None = None
    is_active: bool = True
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None


@dataclass(eq=False)
class AccountNode:
    """Tree node derived from an AccountRecord.

    Nodes compare by identity; ``children`` is filled once while the owning
    tree is built and must be treated as read-only afterwards.
    """

    id: int
    code: str
    name: str
    account_type: str
    level: int
    parent_id: int | None
    is_active: bool
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    children: list["AccountNode"] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: AccountRecord) -> "AccountNode":
        """Create a childless node mirroring ``record``."""
        return cls(
            id=record.id,
            code=record.code,
            name=record.name,
            account_type=record.account_type,
            level=record.level,
            parent_id=record.parent_id,
            is_active=record.is_active,
            description=record.description or None,
            category=record.category or None,
            subcategory=record.subcategory or None,
        )

    def to_record(self) -> AccountRecord:
        """Return the flat record this node mirrors."""
        return AccountRecord(
            id=self.id,
            code=self.code,
            name=self.name,
            account_type=self.account_type,
            level=self.level,
            parent_id=self.parent_id,
            is_active=self.is_active,
            description=self.description,
            category=self.category,
            subcategory=self.subcategory,
        )


__all__ = ["AccountRecord", "AccountNode"]
