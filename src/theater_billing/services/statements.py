"""Statement rendering for customer invoices."""

import logging
from dataclasses import dataclass, field

from theater_billing.domain.currency import CurrencyFormat
from theater_billing.domain.models import Catalog, Invoice
from theater_billing.services.pricing import PricingEngine

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementLine:
    """Priced figures for one performance."""

    play_name: str
    audience: int
    amount: int
    credits: int


@dataclass(frozen=True)
class StatementSummary:
    """All figures needed to render a statement."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_credits: int


@dataclass
class StatementService:
    """Computes and renders customer statements."""

    engine: PricingEngine = field(default_factory=PricingEngine)
    currency: CurrencyFormat = field(default_factory=CurrencyFormat)

    def summarize(self, invoice: Invoice, catalog: Catalog) -> StatementSummary:
        """Price every performance of an invoice."""
        lines = []
        for performance in invoice.performances:
            play = self.engine.resolve_play(performance, catalog)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    audience=performance.audience,
                    amount=self.engine.amount_for(performance, play),
                    credits=self.engine.credits_for(performance, play),
                )
            )
        summary = StatementSummary(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=sum(line.amount for line in lines),
            total_credits=sum(line.credits for line in lines),
        )
        _logger.info(
            "Statement computed: customer=%s performances=%s total=%s credits=%s",
            summary.customer,
            len(summary.lines),
            summary.total_amount,
            summary.total_credits,
        )
        return summary

    def render(self, invoice: Invoice, catalog: Catalog) -> str:
        """Render the text statement for an invoice."""
        return self.format_summary(self.summarize(invoice, catalog))

    def format_summary(self, summary: StatementSummary) -> str:
        """Format computed statement figures as text."""
        lines = [f"Statement for {summary.customer}"]
        for line in summary.lines:
            lines.append(
                f"  {line.play_name}: {self.currency.format(line.amount)} "
                f"({line.audience} seats)"
            )
        lines.append(f"Amount owed is {self.currency.format(summary.total_amount)}")
        lines.append(f"You earned {summary.total_credits} credits")
        return "".join(f"{line}\n" for line in lines)


def compute_statement(
    invoice: Invoice, catalog: Catalog, service: StatementService | None = None
) -> str:
    """Render a statement with the default pricing and US dollar format."""
    return (service or StatementService()).render(invoice, catalog)
