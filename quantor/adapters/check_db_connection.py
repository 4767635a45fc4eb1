"""Health check for the Quantor ledger database.

Run it after editing ``QUANTOR_DB_URL``: it opens one pooled connection,
runs ``SELECT 1`` and reports whether the ``chart_of_accounts`` table has
been created yet (``quantor-seed-chart`` creates it).
"""

from sqlalchemy import text

from quantor.infrastructure.container import build_database_adapter
from quantor.infrastructure.db import dispose_engine
from quantor.infrastructure.logging.logger import get_app_logger


CHART_TABLE_SQL = text("SELECT to_regclass('chart_of_accounts')")


def main() -> None:
    """Check connectivity and the presence of the chart table."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Quantor DB: {engine.url}")

    try:
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
            table = conn.execute(CHART_TABLE_SQL).scalar()
    finally:
        dispose_engine()

    if table is None:
        logger.warning(
            "Table chart_of_accounts is missing; run quantor-seed-chart"
        )
    logger.info("Connection is working.")


if __name__ == "__main__":
    main()
