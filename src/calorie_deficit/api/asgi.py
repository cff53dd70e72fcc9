"""ASGI entrypoint for the nutrition relay."""

from calorie_deficit.api.app import create_app
from calorie_deficit.containers import build_container

app = create_app(build_container())
