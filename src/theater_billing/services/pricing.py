"""Pricing engine for performance amounts and volume credits."""

from dataclasses import dataclass, field
from typing import assert_never

from theater_billing.domain.errors import PlayNotFoundError
from theater_billing.domain.models import Catalog, Genre, Invoice, Performance, Play
from theater_billing.domain.pricing import PricingRules


@dataclass(frozen=True)
class PricingEngine:
    """Computes amounts (minor units) and volume credits per performance."""

    rules: PricingRules = field(default_factory=PricingRules)

    def resolve_play(self, performance: Performance, catalog: Catalog) -> Play:
        """Return the play a performance refers to."""
        play = catalog.get(performance.play_id)
        if play is None:
            raise PlayNotFoundError(performance.play_id)
        return play

    def amount_for(self, performance: Performance, play: Play) -> int:
        """Return the amount owed for a performance."""
        rules = self.rules
        audience = performance.audience
        genre = Genre.parse(play.genre, performance.play_id)
        match genre:
            case Genre.TRAGEDY:
                amount = rules.tragedy_base_amount
                if audience > rules.tragedy_audience_threshold:
                    amount += rules.tragedy_over_base_capacity_per_person * (
                        audience - rules.tragedy_audience_threshold
                    )
            case Genre.COMEDY:
                amount = rules.comedy_base_amount
                if audience > rules.comedy_audience_threshold:
                    amount += (
                        rules.comedy_over_base_capacity_amount
                        + rules.comedy_over_base_capacity_per_person
                        * (audience - rules.comedy_audience_threshold)
                    )
                amount += rules.comedy_amount_per_audience * audience
            case _:
                assert_never(genre)
        return amount

    def credits_for(self, performance: Performance, play: Play) -> int:
        """Return the volume credits earned by a performance."""
        audience = performance.audience
        credits = max(audience - self.rules.base_volume_credit_threshold, 0)
        if play.genre == Genre.COMEDY.value:
            credits += audience // self.rules.comedy_extra_volume_factor
        return credits

    def total_amount(self, invoice: Invoice, catalog: Catalog) -> int:
        """Return the total amount owed for an invoice."""
        return sum(
            self.amount_for(performance, self.resolve_play(performance, catalog))
            for performance in invoice.performances
        )

    def total_credits(self, invoice: Invoice, catalog: Catalog) -> int:
        """Return the total volume credits earned for an invoice."""
        return sum(
            self.credits_for(performance, self.resolve_play(performance, catalog))
            for performance in invoice.performances
        )
