"""CLI adapter seeding the sample chart of accounts for a user."""

from quantor.application.use_cases.seed_sample_chart import (
    SeedSampleChartUseCase,
)
from quantor.infrastructure.container import (
    build_chart_of_accounts_repository,
    build_settings,
)
from quantor.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the seeding use case for the configured user."""
    logger = get_app_logger()
    settings = build_settings()
    use_case = SeedSampleChartUseCase(
        repository=build_chart_of_accounts_repository(),
        logger=logger,
    )

    result = use_case.execute(settings.user_id)

    if result.inserted_count:
        print(
            f"Seeded {result.inserted_count} accounts "
            f"for user {settings.user_id}."
        )
    else:
        print(
            f"User {settings.user_id} already has "
            f"{result.existing_count} accounts; nothing seeded."
        )


if __name__ == "__main__":  # pragma: no cover
    main()
