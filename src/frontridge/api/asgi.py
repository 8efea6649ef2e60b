"""ASGI entrypoint for the Front Ridge works API."""

from frontridge.api.app import create_app
from frontridge.containers import build_container

app = create_app(build_container())
