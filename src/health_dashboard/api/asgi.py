"""ASGI entrypoint for the health dashboard API."""

from health_dashboard.api.app import create_app
from health_dashboard.containers import build_container

app = create_app(build_container())
