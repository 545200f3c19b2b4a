# src/levchange/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file; every
field has a default, so the calculator runs without any configuration.

The EUR/BGN rate is intentionally not a setting: it is fixed by law.

Files that USE this module:
- levchange.app (logging options and display decimals)
- levchange.application.calculator_state (default currencies for initial_inputs)

Files that this module USES:
- levchange.domain.models (Currency for the default currencies)
- levchange.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from levchange.domain.models import Currency
from levchange.shared.validators import (
    validate_currency_code,  # Validate EUR/BGN codes
    validate_log_level,  # Validate logging level names
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Calculator defaults ---
    default_price_currency: str = Field(default="EUR", alias="DEFAULT_PRICE_CURRENCY")
    default_paid_currency: str = Field(default="BGN", alias="DEFAULT_PAID_CURRENCY")
    display_decimals: int = Field(default=2, alias="DISPLAY_DECIMALS", ge=0, le=6)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="LEVCHANGE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def price_currency(self) -> Currency:
        """Currency preselected for the price field."""
        return Currency.parse(self.default_price_currency)

    @property
    def paid_currency(self) -> Currency:
        """Currency preselected for the paid amount field."""
        return Currency.parse(self.default_paid_currency)

    @field_validator("default_price_currency", "default_paid_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate and normalize currency codes."""
        if not validate_currency_code(v):
            raise ValueError("Currency must be 'EUR' or 'BGN'")
        return v.strip().upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        if not validate_log_level(v):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.strip().upper()


# Global settings instance
settings = Settings()
