"""Shared test fixtures."""

import pytest

from theater_billing.config import Settings
from theater_billing.containers import AppContainer, build_container
from theater_billing.domain.models import (
    Catalog,
    Invoice,
    Performance,
    Play,
    build_catalog,
)

PLAYS_JSON = """
{
  "hamlet": {"name": "Hamlet", "type": "tragedy"},
  "as-like": {"name": "As You Like It", "type": "comedy"},
  "othello": {"name": "Othello", "type": "tragedy"}
}
"""

INVOICES_JSON = """
[
  {
    "customer": "BigCo",
    "performances": [
      {"playID": "hamlet", "audience": 55},
      {"playID": "as-like", "audience": 35},
      {"playID": "othello", "audience": 40}
    ]
  }
]
"""

BIGCO_STATEMENT = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def catalog() -> Catalog:
    return build_catalog(
        {
            "hamlet": Play(name="Hamlet", genre="tragedy"),
            "as-like": Play(name="As You Like It", genre="comedy"),
            "othello": Play(name="Othello", genre="tragedy"),
        }
    )


@pytest.fixture
def bigco_invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )
