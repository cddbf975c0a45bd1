"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from theater_billing.domain.currency import CurrencyFormat
from theater_billing.domain.pricing import PricingRules

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_RULES = PricingRules()
_CURRENCY = CurrencyFormat()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    tragedy_base_amount: int = _RULES.tragedy_base_amount
    tragedy_audience_threshold: int = _RULES.tragedy_audience_threshold
    tragedy_over_base_capacity_per_person: int = (
        _RULES.tragedy_over_base_capacity_per_person
    )
    comedy_base_amount: int = _RULES.comedy_base_amount
    comedy_audience_threshold: int = _RULES.comedy_audience_threshold
    comedy_over_base_capacity_amount: int = _RULES.comedy_over_base_capacity_amount
    comedy_over_base_capacity_per_person: int = (
        _RULES.comedy_over_base_capacity_per_person
    )
    comedy_amount_per_audience: int = _RULES.comedy_amount_per_audience
    base_volume_credit_threshold: int = _RULES.base_volume_credit_threshold
    comedy_extra_volume_factor: int = _RULES.comedy_extra_volume_factor
    currency_minor_unit_factor: int = _CURRENCY.minor_unit_factor
    currency_symbol: str = _CURRENCY.symbol
    currency_grouping_separator: str = _CURRENCY.grouping_separator
    currency_decimal_separator: str = _CURRENCY.decimal_separator
    currency_fraction_digits: int = _CURRENCY.fraction_digits
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="THEATER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def pricing_rules_from_settings(settings: Settings) -> PricingRules:
    """Build pricing rules from settings."""
    return PricingRules(
        tragedy_base_amount=settings.tragedy_base_amount,
        tragedy_audience_threshold=settings.tragedy_audience_threshold,
        tragedy_over_base_capacity_per_person=(
            settings.tragedy_over_base_capacity_per_person
        ),
        comedy_base_amount=settings.comedy_base_amount,
        comedy_audience_threshold=settings.comedy_audience_threshold,
        comedy_over_base_capacity_amount=settings.comedy_over_base_capacity_amount,
        comedy_over_base_capacity_per_person=(
            settings.comedy_over_base_capacity_per_person
        ),
        comedy_amount_per_audience=settings.comedy_amount_per_audience,
        base_volume_credit_threshold=settings.base_volume_credit_threshold,
        comedy_extra_volume_factor=settings.comedy_extra_volume_factor,
    )


def currency_format_from_settings(settings: Settings) -> CurrencyFormat:
    """Build the currency display format from settings."""
    return CurrencyFormat(
        symbol=settings.currency_symbol,
        grouping_separator=settings.currency_grouping_separator,
        decimal_separator=settings.currency_decimal_separator,
        fraction_digits=settings.currency_fraction_digits,
        minor_unit_factor=settings.currency_minor_unit_factor,
    )
