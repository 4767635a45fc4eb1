"""Domain constants for the chart of accounts."""

ACCOUNT_TYPE_REVENUE = "receita"
ACCOUNT_TYPE_EXPENSE = "despesa"
ACCOUNT_TYPE_ASSET = "ativo"
ACCOUNT_TYPE_LIABILITY = "passivo"

ACCOUNT_TYPES = (
    ACCOUNT_TYPE_REVENUE,
    ACCOUNT_TYPE_EXPENSE,
    ACCOUNT_TYPE_ASSET,
    ACCOUNT_TYPE_LIABILITY,
)

CATEGORY_LEVEL = 1
SUBCATEGORY_LEVEL = 2
ACCOUNT_LEVEL = 3
MAX_ACCOUNT_LEVEL = ACCOUNT_LEVEL

# Pixels of indentation per level below the root.
INDENT_PER_LEVEL = 20

CODE_SEPARATOR = "."
ACCOUNT_CODE_PADDING = 3
PATH_SEPARATOR = " > "


__all__ = [
    "ACCOUNT_TYPE_REVENUE",
    "ACCOUNT_TYPE_EXPENSE",
    "ACCOUNT_TYPE_ASSET",
    "ACCOUNT_TYPE_LIABILITY",
    "ACCOUNT_TYPES",
    "CATEGORY_LEVEL",
    "SUBCATEGORY_LEVEL",
    "ACCOUNT_LEVEL",
    "MAX_ACCOUNT_LEVEL",
    "INDENT_PER_LEVEL",
    "CODE_SEPARATOR",
    "ACCOUNT_CODE_PADDING",
    "PATH_SEPARATOR",
]
