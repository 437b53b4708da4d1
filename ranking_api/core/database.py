"""Database configuration and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, create_engine

from .config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by ``settings``."""

    connect_args: Dict[str, Any] = {}
    if settings.is_sqlite:
        connect_args["check_same_thread"] = False
        database = make_url(settings.database_url).database
        if database and database != ":memory:":
            Path(database).resolve().parent.mkdir(parents=True, exist_ok=True)
    elif settings.database_sslmode:
        connect_args["sslmode"] = settings.database_sslmode

    return create_engine(settings.database_url, connect_args=connect_args)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["build_engine", "get_session"]
