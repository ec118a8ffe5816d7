"""ASGI entry point: ``uvicorn src.main:app``."""

from src.api import create_app

app = create_app()
