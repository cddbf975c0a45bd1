"""Pydantic models for plays, invoices and statement payloads."""

from collections.abc import Mapping

from pydantic import BaseModel, Field, RootModel

from theater_billing.domain.models import (
    Catalog,
    Invoice,
    Performance,
    Play,
    build_catalog,
)


class PlayPayload(BaseModel):
    """Play payload."""

    name: str
    type: str


class PerformancePayload(BaseModel):
    """Performance payload."""

    play_id: str = Field(alias="playID")
    audience: int = Field(ge=0)


class InvoicePayload(BaseModel):
    """Invoice payload."""

    customer: str
    performances: list[PerformancePayload] = Field(default_factory=list)


class PlaysPayload(RootModel[dict[str, PlayPayload]]):
    """Plays keyed by play id."""


class InvoicesPayload(RootModel[list[InvoicePayload] | InvoicePayload]):
    """A list of invoices or a single invoice object."""


class StatementRequest(BaseModel):
    """Request body for computing a statement."""

    plays: dict[str, PlayPayload]
    invoice: InvoicePayload


class StatementLineResponse(BaseModel):
    """Priced performance line."""

    play_name: str
    audience: int
    amount: int
    credits: int


class StatementResponse(BaseModel):
    """Computed statement with raw figures."""

    statement: str
    total_amount: int
    total_credits: int
    lines: list[StatementLineResponse]


def catalog_from_payload(payload: Mapping[str, PlayPayload]) -> Catalog:
    """Convert parsed plays into a catalog."""
    return build_catalog(
        {
            play_id: Play(name=play.name, genre=play.type)
            for play_id, play in payload.items()
        }
    )


def invoice_from_payload(payload: InvoicePayload) -> Invoice:
    """Convert a parsed invoice into the domain model."""
    return Invoice(
        customer=payload.customer,
        performances=tuple(
            Performance(play_id=item.play_id, audience=item.audience)
            for item in payload.performances
        ),
    )
