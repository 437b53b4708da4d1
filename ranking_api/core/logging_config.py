"""Logging configuration for the application."""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger, once."""

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        # pytest and repeated create_app calls already installed handlers
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)


__all__ = ["setup_logging"]
