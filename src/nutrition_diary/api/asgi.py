"""ASGI entrypoint for the nutrition diary API."""

from nutrition_diary.api.app import create_app
from nutrition_diary.containers import build_container

app = create_app(build_container())
