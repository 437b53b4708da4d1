"""Core configuration and infrastructure helpers."""

from .config import Settings, load_settings
from .database import build_engine, get_session
from .logging_config import setup_logging
from .time import isoformat_utc, utcnow

__all__ = [
    "Settings",
    "build_engine",
    "get_session",
    "isoformat_utc",
    "load_settings",
    "setup_logging",
    "utcnow",
]
