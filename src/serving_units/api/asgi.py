"""ASGI entrypoint for the serving units API."""

from serving_units.api.app import create_app
from serving_units.containers import build_container

app = create_app(build_container())
