"""ASGI entrypoint for the bariatric score API."""

from bari_score.api.app import create_app
from bari_score.containers import build_container

app = create_app(build_container())
