"""Domain models for plays, performances and invoices."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Self

from theater_billing.domain.errors import UnknownPlayGenreError


class Genre(Enum):
    """Play genres with a pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: str, play_id: str) -> Self:
        """Return the genre for a raw value or raise for unpriced genres."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayGenreError(value, play_id) from None


@dataclass(frozen=True)
class Play:
    """A play in the catalog."""

    name: str
    genre: str


@dataclass(frozen=True)
class Performance:
    """A single showing of a play."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    """A customer's performances billed together."""

    customer: str
    performances: tuple[Performance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))


Catalog = Mapping[str, Play]


def build_catalog(plays: Mapping[str, Play]) -> Catalog:
    """Return a read-only catalog snapshot of the given plays."""
    return MappingProxyType(dict(plays))
