"""Domain package for the chart of accounts and its business rules."""

from .constants import ACCOUNT_TYPES, MAX_ACCOUNT_LEVEL
from .errors import ChartOfAccountsError, CyclicHierarchyError
from .models import AccountNode, AccountRecord
from .sample_data import SAMPLE_CHART_OF_ACCOUNTS
from .services import (
    ChartOfAccountsTree,
    build_chart_of_accounts_tree,
    validate_cnpj,
    validate_cpf,
)

__all__ = [
    "ACCOUNT_TYPES",
    "MAX_ACCOUNT_LEVEL",
    "ChartOfAccountsError",
    "CyclicHierarchyError",
    "AccountNode",
    "AccountRecord",
    "SAMPLE_CHART_OF_ACCOUNTS",
    "ChartOfAccountsTree",
    "build_chart_of_accounts_tree",
    "validate_cnpj",
    "validate_cpf",
]
