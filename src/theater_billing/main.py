"""Command-line entrypoint that prints statements for invoice files."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from theater_billing.app_logging import configure_logging
from theater_billing.containers import build_container
from theater_billing.domain.errors import DomainError

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theater-billing",
        description="Print billing statements for theater invoices.",
    )
    parser.add_argument("plays", type=Path, help="JSON file of plays by id")
    parser.add_argument("invoices", type=Path, help="JSON file of invoices")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print one statement per invoice and return the exit status."""
    args = _build_parser().parse_args(argv)
    container = build_container()
    configure_logging(container.settings.log_level)
    provider = container.data_provider
    try:
        catalog = provider.load_catalog(args.plays)
        invoices = provider.load_invoices(args.invoices)
        statements = [
            container.statement_service.render(invoice, catalog)
            for invoice in invoices
        ]
    except DomainError as exc:
        _logger.error("Statement failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("\n".join(statements))
    return 0


if __name__ == "__main__":
    sys.exit(main())
