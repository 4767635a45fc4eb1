"""Demonstration chart of accounts used for seeding and previews."""

from quantor.domain.constants import (
    ACCOUNT_TYPE_EXPENSE,
    ACCOUNT_TYPE_REVENUE,
)
from quantor.domain.models.accounts import AccountRecord


SAMPLE_CHART_OF_ACCOUNTS: tuple[AccountRecord, ...] = (
    # Categories
    AccountRecord(
        id=1,
        code="1",
        name="Receitas",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=1,
        category="Receitas",
        description="Todas as receitas da empresa",
    ),
    AccountRecord(
        id=2,
        code="2",
        name="Despesas",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=1,
        category="Despesas",
        description="Todas as despesas da empresa",
    ),
    # Subcategories
    AccountRecord(
        id=3,
        code="1.1",
        name="Receitas Operacionais",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=2,
        parent_id=1,
        category="Receitas",
        subcategory="Receitas Operacionais",
        description="Receitas da atividade principal",
    ),
    AccountRecord(
        id=4,
        code="1.2",
        name="Receitas Não Operacionais",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=2,
        parent_id=1,
        category="Receitas",
        subcategory="Receitas Não Operacionais",
        description="Receitas de outras atividades",
    ),
    AccountRecord(
        id=5,
        code="2.1",
        name="Despesas Administrativas",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=2,
        parent_id=2,
        category="Despesas",
        subcategory="Despesas Administrativas",
        description="Gastos administrativos",
    ),
    AccountRecord(
        id=6,
        code="2.2",
        name="Despesas Operacionais",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=2,
        parent_id=2,
        category="Despesas",
        subcategory="Despesas Operacionais",
        description="Gastos operacionais",
    ),
    # Leaf accounts
    AccountRecord(
        id=7,
        code="1.1.001",
        name="Vendas de Produtos",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=3,
        parent_id=3,
        category="Receitas",
        subcategory="Receitas Operacionais",
        description="Receita com vendas de produtos",
    ),
    AccountRecord(
        id=8,
        code="1.1.002",
        name="Prestação de Serviços",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=3,
        parent_id=3,
        category="Receitas",
        subcategory="Receitas Operacionais",
        description="Receita com serviços prestados",
    ),
    AccountRecord(
        id=9,
        code="1.2.001",
        name="Rendimentos Financeiros",
        account_type=ACCOUNT_TYPE_REVENUE,
        level=3,
        parent_id=4,
        category="Receitas",
        subcategory="Receitas Não Operacionais",
        description="Juros e rendimentos",
    ),
    AccountRecord(
        id=10,
        code="2.1.001",
        name="Material de Escritório",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=3,
        parent_id=5,
        category="Despesas",
        subcategory="Despesas Administrativas",
        description="Gastos com material de escritório",
    ),
    AccountRecord(
        id=11,
        code="2.1.002",
        name="Salários e Encargos",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=3,
        parent_id=5,
        category="Despesas",
        subcategory="Despesas Administrativas",
        description="Folha de pagamento",
    ),
    AccountRecord(
        id=12,
        code="2.2.001",
        name="Energia Elétrica",
        account_type=ACCOUNT_TYPE_EXPENSE,
        level=3,
        parent_id=6,
        category="Despesas",
        subcategory="Despesas Operacionais",
        description="Conta de energia elétrica",
    ),
)


__all__ = ["SAMPLE_CHART_OF_ACCOUNTS"]
