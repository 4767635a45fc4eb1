"""Domain services package."""

from .account_codes import format_child_code, parse_code_segment, split_code
from .chart_of_accounts import (
    ChartOfAccountsTree,
    build_chart_of_accounts_tree,
)
from .documents import (
    detect_document_type,
    format_cnpj,
    format_cpf,
    validate_cnpj,
    validate_cpf,
)

__all__ = [
    "ChartOfAccountsTree",
    "build_chart_of_accounts_tree",
    "format_child_code",
    "parse_code_segment",
    "split_code",
    "detect_document_type",
    "format_cnpj",
    "format_cpf",
    "validate_cnpj",
    "validate_cpf",
]
