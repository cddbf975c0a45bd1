"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from theater_billing.api.statement_models import (
    StatementLineResponse,
    StatementRequest,
    StatementResponse,
    catalog_from_payload,
    invoice_from_payload,
)
from theater_billing.app_logging import configure_logging
from theater_billing.containers import AppContainer
from theater_billing.domain.errors import DomainError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.warning("Statement rejected: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"code": exc.code.value, "message": exc.message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/statements")
    async def create_statement(
        body: StatementRequest, request: Request
    ) -> StatementResponse:
        """Compute a statement for an invoice against the given plays."""
        state_container: AppContainer = request.app.state.container
        service = state_container.statement_service
        summary = service.summarize(
            invoice_from_payload(body.invoice), catalog_from_payload(body.plays)
        )
        return StatementResponse(
            statement=service.format_summary(summary),
            total_amount=summary.total_amount,
            total_credits=summary.total_credits,
            lines=[
                StatementLineResponse(
                    play_name=line.play_name,
                    audience=line.audience,
                    amount=line.amount,
                    credits=line.credits,
                )
                for line in summary.lines
            ],
        )

    return app
