"""Currency display formatting."""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal


@dataclass(frozen=True)
class CurrencyFormat:
    """Explicit currency display convention (US dollars by default)."""

    symbol: str = "$"
    grouping_separator: str = ","
    decimal_separator: str = "."
    fraction_digits: int = 2
    minor_unit_factor: int = 100

    def __post_init__(self) -> None:
        if self.minor_unit_factor <= 0:
            raise ValueError("Minor unit factor must be positive")
        if self.fraction_digits < 0:
            raise ValueError("Fraction digits cannot be negative")

    def format(self, minor_units: int) -> str:
        """Format an amount in minor units, e.g. 410000 -> $4,100.00."""
        value = Decimal(minor_units) / Decimal(self.minor_unit_factor)
        quantum = Decimal(1).scaleb(-self.fraction_digits)
        value = value.quantize(quantum, rounding=ROUND_HALF_EVEN)
        digits = f"{abs(value):,.{self.fraction_digits}f}"
        digits = digits.translate(
            str.maketrans({",": self.grouping_separator, ".": self.decimal_separator})
        )
        sign = "-" if value < 0 else ""
        return f"{sign}{self.symbol}{digits}"
