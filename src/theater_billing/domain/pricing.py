"""Pricing rule values."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class PricingRules:
    """Amounts are in minor currency units."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5

    def __post_init__(self) -> None:
        for rule in fields(self):
            if getattr(self, rule.name) <= 0:
                raise ValueError(f"Pricing rule {rule.name} must be positive")
