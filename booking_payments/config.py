"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    service_name: str = "booking-payments"
    log_level: str = "INFO"


class PricingSettings(BaseSettings):
    """
    Fee rates and flat fees used by the charge engine.

    Every value can be overridden with a PRICING_* environment variable, or by
    constructing an instance directly and passing it to FeeCalculator.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRICING_", env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Flat fee on deposit transactions, in cents ($7)
    transfer_fee_cents: int = Field(default=700, ge=0)

    # Service (platform) fee tiers
    service_fee_short_term_rate: Decimal = Field(default=Decimal("0.03"), ge=0, lt=1)
    service_fee_long_term_rate: Decimal = Field(default=Decimal("0.015"), ge=0, lt=1)
    service_fee_threshold_months: int = Field(default=6, ge=1)

    # Processor cut recovered by the self-inclusive card fee
    credit_card_fee_rate: Decimal = Field(default=Decimal("0.03"), ge=0, lt=1)

    # Rounding slack allowed when reconciling a breakdown
    validation_tolerance_cents: int = Field(default=1, ge=0)


settings = Settings()
pricing = PricingSettings()
