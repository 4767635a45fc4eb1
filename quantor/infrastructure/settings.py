"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from quantor.infrastructure.logging.logger import get_app_logger


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class QuantorSettings:
    """Settings for the chart-of-accounts adapters.

    Attributes:
        user_id: Owner of the chart of accounts the CLIs operate on.
        use_sample_data: Read the built-in sample chart instead of the
            database.
    """

    user_id: str = "1"
    use_sample_data: bool = False

    @classmethod
    def from_env(cls) -> "QuantorSettings":
        """Build settings from environment variables.

        Returns:
            QuantorSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        user_id = os.getenv("QUANTOR_USER_ID", "1").strip()
        if not user_id:
            get_app_logger().warning(
                "QUANTOR_USER_ID is empty; falling back to user 1"
            )
            user_id = "1"
        use_sample_data = cls._parse_flag(os.getenv("QUANTOR_USE_SAMPLE"))
        return cls(user_id=user_id, use_sample_data=use_sample_data)

    @staticmethod
    def _parse_flag(raw_value: str | None) -> bool:
        """Interpret an environment flag.

        Args:
            raw_value: Raw environment value, possibly None.

        Returns:
            bool: True for ``1``, ``true``, ``yes`` or ``on``.
        """
        if raw_value is None:
            return False
        return raw_value.strip().lower() in _TRUTHY


__all__ = ["QuantorSettings"]
