"""Domain errors for the chart of accounts."""

from collections.abc import Sequence


class ChartOfAccountsError(Exception):
    """Base class for chart-of-accounts domain errors."""


class CyclicHierarchyError(ChartOfAccountsError):
    """Raised when parent references form a cycle.

    Attributes:
        cycle: Account ids forming the cycle, in parent-walk order.
    """

    def __init__(self, cycle: Sequence[int]) -> None:
        self.cycle = tuple(cycle)
        chain = " -> ".join(str(account_id) for account_id in self.cycle)
        super().__init__(f"Cyclic parent chain detected: {chain}")


__all__ = ["ChartOfAccountsError", "CyclicHierarchyError"]
