"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

_DEFAULT_DATABASE_URL = "sqlite:///data/rankings.db"


def _require_env(env: Mapping[str, str], name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = env.get(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _normalize_database_url(url: str) -> str:
    # Hosting providers hand out bare postgres:// URLs; pin the psycopg driver.
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


@dataclass(frozen=True)
class Settings:
    """Configuration constructed once at startup and passed around explicitly."""

    admin_reset_password: str
    database_url: str = _DEFAULT_DATABASE_URL
    database_sslmode: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the process environment.

    ``ADMIN_RESET_PASSWORD`` has no fallback: a missing secret stops startup.
    """

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    raw_port = env.get("PORT") or "3000"
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise RuntimeError("PORT must be an integer") from exc

    return Settings(
        admin_reset_password=_require_env(env, "ADMIN_RESET_PASSWORD"),
        database_url=_normalize_database_url(
            env.get("DATABASE_URL") or _DEFAULT_DATABASE_URL
        ),
        database_sslmode=env.get("DATABASE_SSLMODE") or None,
        host=env.get("HOST") or "0.0.0.0",
        port=port,
        cors_origins=_split_csv(env.get("CORS_ORIGINS")) or ["*"],
        log_level=env.get("LOG_LEVEL") or "INFO",
    )


__all__ = ["Settings", "load_settings"]
