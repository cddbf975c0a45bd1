"""Tests for settings."""

import pytest

from theater_billing.config import (
    Settings,
    currency_format_from_settings,
    pricing_rules_from_settings,
)
from theater_billing.containers import build_container
from theater_billing.domain.currency import CurrencyFormat
from theater_billing.domain.pricing import PricingRules


def test_default_settings_match_default_rules(settings) -> None:
    assert pricing_rules_from_settings(settings) == PricingRules()
    assert currency_format_from_settings(settings) == CurrencyFormat()


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("THEATER_COMEDY_BASE_AMOUNT", "25000")
    monkeypatch.setenv("THEATER_CURRENCY_SYMBOL", "€")

    settings = Settings()

    assert settings.comedy_base_amount == 25000
    assert currency_format_from_settings(settings).symbol == "€"


def test_settings_defaults_follow_domain_defaults() -> None:
    settings = Settings(environment="test")

    assert settings.tragedy_base_amount == PricingRules().tragedy_base_amount
    assert settings.currency_symbol == CurrencyFormat().symbol


def test_negative_rule_from_environment_rejected(monkeypatch) -> None:
    monkeypatch.setenv("THEATER_TRAGEDY_BASE_AMOUNT", "-1")

    with pytest.raises(ValueError, match="tragedy_base_amount"):
        build_container(Settings())
