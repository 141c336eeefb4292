"""Logging setup shared by the API server and the CLI scripts."""

from __future__ import annotations

import logging
import sys

from lease_server.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from the ``logging`` settings section."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.debug:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format=settings.logging.format,
        stream=sys.stdout,
        force=True,
    )
