"""Application use cases package."""

from .create_chart_account import (
    AccountCreationError,
    CreateChartAccountUseCase,
)
from .get_chart_of_accounts_tree import GetChartOfAccountsTreeUseCase
from .seed_sample_chart import SeedSampleChartResult, SeedSampleChartUseCase

__all__ = [
    "AccountCreationError",
    "CreateChartAccountUseCase",
    "GetChartOfAccountsTreeUseCase",
    "SeedSampleChartResult",
    "SeedSampleChartUseCase",
]
