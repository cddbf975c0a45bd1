"""Tests for statement rendering."""

import pytest

from theater_billing.domain.currency import CurrencyFormat
from theater_billing.domain.errors import PlayNotFoundError, UnknownPlayGenreError
from theater_billing.domain.models import Invoice, Performance, Play, build_catalog
from theater_billing.services.statements import StatementService, compute_statement
from tests.conftest import BIGCO_STATEMENT


def test_render_bigco_statement(catalog, bigco_invoice) -> None:
    assert compute_statement(bigco_invoice, catalog) == BIGCO_STATEMENT


def test_render_single_hamlet_line() -> None:
    catalog = build_catalog({"hamlet": Play(name="Hamlet", genre="tragedy")})
    invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 400),))

    statement = StatementService().render(invoice, catalog)

    assert statement.splitlines() == [
        "Statement for BigCo",
        "  Hamlet: $4,100.00 (400 seats)",
        "Amount owed is $4,100.00",
        "You earned 370 credits",
    ]


def test_render_empty_invoice(catalog) -> None:
    statement = StatementService().render(Invoice(customer="Quiet"), catalog)

    assert statement == (
        "Statement for Quiet\nAmount owed is $0.00\nYou earned 0 credits\n"
    )


def test_render_is_deterministic(catalog, bigco_invoice) -> None:
    service = StatementService()

    assert service.render(bigco_invoice, catalog) == service.render(
        bigco_invoice, catalog
    )


def test_render_uses_configured_currency(catalog, bigco_invoice) -> None:
    service = StatementService(
        currency=CurrencyFormat(
            symbol="€", grouping_separator=".", decimal_separator=","
        )
    )

    statement = service.render(bigco_invoice, catalog)

    assert "Amount owed is €1.730,00" in statement


def test_unknown_genre_aborts_statement(catalog) -> None:
    catalog = build_catalog(
        {**catalog, "cats": Play(name="Cats", genre="musical")}
    )
    invoice = Invoice(
        customer="BigCo",
        performances=(Performance("hamlet", 10), Performance("cats", 10)),
    )

    with pytest.raises(UnknownPlayGenreError):
        StatementService().render(invoice, catalog)


def test_missing_play_aborts_statement(catalog) -> None:
    invoice = Invoice(customer="BigCo", performances=(Performance("lear", 10),))

    with pytest.raises(PlayNotFoundError):
        StatementService().render(invoice, catalog)


def test_summarize_returns_raw_figures(catalog, bigco_invoice) -> None:
    summary = StatementService().summarize(bigco_invoice, catalog)

    assert [line.amount for line in summary.lines] == [65000, 58000, 50000]
    assert [line.credits for line in summary.lines] == [25, 12, 10]
    assert summary.total_amount == 173000
    assert summary.total_credits == 47
