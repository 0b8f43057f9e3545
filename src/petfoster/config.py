"""Environment-driven settings for the pricing engine.

Values are read once from the process environment and cached. Tests that
change the environment should call ``get_settings.cache_clear()``.
"""

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEZONE = "UTC"
DEFAULT_ORDER_PREFIX = "PF"
DEFAULT_CURRENCY_SYMBOL = "¥"


class Settings(BaseModel):
    """Runtime configuration for the engine and its HTTP surface."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(default="dev", description="Deployment environment name")
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone used for local day boundaries",
    )
    order_prefix: str = Field(
        default=DEFAULT_ORDER_PREFIX,
        pattern=r"^[A-Z]{2,4}$",
        description="Prefix for generated booking order numbers",
    )
    currency_symbol: str = Field(default=DEFAULT_CURRENCY_SYMBOL)
    log_level: str = Field(default="INFO")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        """Timezone object for ``timezone``."""
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            timezone=os.environ.get("PETFOSTER_TIMEZONE", DEFAULT_TIMEZONE),
            order_prefix=os.environ.get("PETFOSTER_ORDER_PREFIX", DEFAULT_ORDER_PREFIX),
            currency_symbol=os.environ.get(
                "PETFOSTER_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings loaded from the environment.
    """
    return Settings.from_env()
