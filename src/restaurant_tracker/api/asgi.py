"""ASGI entrypoint for the restaurant tracker API."""

from restaurant_tracker.api.app import create_app
from restaurant_tracker.containers import build_container

app = create_app(build_container())
