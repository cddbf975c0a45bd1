"""Dependency container wiring for the application."""

from dataclasses import dataclass

from theater_billing.adapters.json_data_provider import JsonDataProvider
from theater_billing.config import (
    Settings,
    currency_format_from_settings,
    pricing_rules_from_settings,
)
from theater_billing.services.pricing import PricingEngine
from theater_billing.services.statements import StatementService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pricing_engine: PricingEngine
    statement_service: StatementService
    data_provider: JsonDataProvider


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    pricing_engine = PricingEngine(pricing_rules_from_settings(resolved_settings))
    statement_service = StatementService(
        engine=pricing_engine,
        currency=currency_format_from_settings(resolved_settings),
    )
    return AppContainer(
        settings=resolved_settings,
        pricing_engine=pricing_engine,
        statement_service=statement_service,
        data_provider=JsonDataProvider(),
    )
