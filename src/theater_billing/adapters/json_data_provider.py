"""JSON loader for plays and invoices."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from theater_billing.api.statement_models import (
    InvoicePayload,
    InvoicesPayload,
    PlaysPayload,
    catalog_from_payload,
    invoice_from_payload,
)
from theater_billing.domain.errors import InvalidDataError
from theater_billing.domain.models import Catalog, Invoice


@dataclass
class JsonDataProvider:
    """Loads plays and invoices from JSON documents."""

    def parse_catalog(self, raw: str | bytes) -> Catalog:
        """Parse a plays document into a catalog."""
        try:
            plays = PlaysPayload.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidDataError(_describe(exc, "plays")) from exc
        return catalog_from_payload(plays.root)

    def parse_invoices(self, raw: str | bytes) -> list[Invoice]:
        """Parse an invoices document; a single invoice object is accepted."""
        try:
            invoices = InvoicesPayload.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidDataError(_describe(exc, "invoices")) from exc
        items = invoices.root
        if isinstance(items, InvoicePayload):
            items = [items]
        return [invoice_from_payload(item) for item in items]

    def load_catalog(self, path: Path) -> Catalog:
        """Load a catalog from a plays file."""
        return self.parse_catalog(_read(path))

    def load_invoices(self, path: Path) -> list[Invoice]:
        """Load invoices from a file."""
        return self.parse_invoices(_read(path))


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InvalidDataError(f"{path}: {exc.strerror or exc}") from exc


def _describe(exc: ValidationError, source: str) -> str:
    """Summarize the first validation problem."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    return f"{source}: {location}: {error.get('msg', 'invalid value')}"
