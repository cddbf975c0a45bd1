"""ASGI entrypoint for the theater billing API."""

from theater_billing.api.app import create_app
from theater_billing.containers import build_container

app = create_app(build_container())
