"""Logging setup for applications embedding the simulator."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start. The library never configures logging itself."""
    settings = config.logging
    level = (level or settings.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=settings.format,
        datefmt=settings.datefmt,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
