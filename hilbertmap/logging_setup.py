"""Logging setup for applications embedding hilbertmap. The library never calls it itself."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from hilbertmap.config import Settings


def configure_logging(level: str | None = None) -> None:
    load_dotenv()
    if level is None:
        level = Settings().hilbertmap_log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
