"""Application configuration using pydantic-settings."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Decision thresholds
    YOUNG_APPLICANT_AGE: int = 25
    DETAILED_LOOKUP_AGE: int = 30
    LOW_INCOME_THRESHOLD: Decimal = Decimal("20000")
    HIGH_INCOME_THRESHOLD: Decimal = Decimal("100000")

    # Frequent flyer validator service
    VALID_LICENSE_KEY: str = "OK"
    FREQUENT_FLYER_NUMBER_PATTERN: str = "[a-z]"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


# Global settings instance
settings = Settings()
