"""Helpers to launch the analytics HTTP API."""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn

from .config import TimelineSettings
from .webapp import create_app


def run_server(
    *,
    host: str = "127.0.0.1",
    port: int = 8765,
    settings: Optional[TimelineSettings] = None,
    log_level: str = "info",
) -> None:
    """Start the FastAPI app under uvicorn."""
    app = create_app(settings=settings or TimelineSettings())
    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=host, port=port, log_level=log_level)
