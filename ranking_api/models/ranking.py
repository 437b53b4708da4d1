"""Database model for player rankings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Ranking(SQLModel, table=True):
    """Best score recorded for a single player name."""

    __tablename__ = "rankings"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True)
    score: int
    timestamp: datetime = ORMField(
        default_factory=utcnow, sa_type=DateTime(timezone=True)
    )


__all__ = ["Ranking"]
