"""Application ports package."""

from .chart_of_accounts_repository import (
    ChartAccountDraft,
    ChartOfAccountsRepositoryPort,
)
from .database import DatabaseEnginePort

__all__ = [
    "ChartAccountDraft",
    "ChartOfAccountsRepositoryPort",
    "DatabaseEnginePort",
]
