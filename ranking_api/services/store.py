"""Persistence for ranking records.

The store is the only place that talks to the ``rankings`` table. Every
database failure is logged here and re-raised as :class:`StoreError`; there
are no retries.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from ..core.time import utcnow
from ..models import Ranking
from .errors import StoreError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

CREATED = "created"
UPDATED = "updated"
NOT_UPDATED = "not updated"


def initialize(engine: Engine) -> None:
    """Create the ``rankings`` table if it does not exist yet."""

    try:
        SQLModel.metadata.create_all(engine, tables=[Ranking.__table__])
    except SQLAlchemyError as exc:
        logger.exception("Error creating database table")
        raise StoreError("Could not create the rankings table") from exc
    logger.info('Database table "rankings" is ready.')


class RankingStore:
    """Queries over the ``rankings`` table for a single session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _query(self, action: str) -> Iterator[None]:
        # sqlite3 raises OverflowError itself for integers beyond 64 bits
        try:
            yield
        except (SQLAlchemyError, OverflowError) as exc:
            self.session.rollback()
            logger.exception("Error %s", action)
            raise StoreError(f"Failed {action}") from exc

    def top_scores(self, limit: int = DEFAULT_LIMIT) -> List[Ranking]:
        """Best records first; equal scores are ordered by who got there first."""

        with self._query("fetching rankings"):
            return list(
                self.session.exec(
                    select(Ranking)
                    .order_by(
                        Ranking.score.desc(),
                        Ranking.timestamp.asc(),
                        Ranking.id.asc(),
                    )
                    .limit(limit)
                ).all()
            )

    def find_by_name(self, name: str) -> Optional[Ranking]:
        with self._query("looking up ranking"):
            return self.session.exec(
                select(Ranking).where(Ranking.name == name)
            ).first()

    def insert(self, name: str, score: int) -> Ranking:
        """Create a record for a name that has none yet."""

        record = Ranking(name=name, score=score)
        with self._query("saving ranking"):
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        return record

    def update_score(self, name: str, score: int) -> Optional[Ranking]:
        """Overwrite the score for ``name`` and refresh its timestamp."""

        with self._query("saving ranking"):
            self.session.exec(
                update(Ranking)
                .where(Ranking.name == name)
                .values(score=score, timestamp=utcnow())
            )
            self.session.commit()
        return self.find_by_name(name)

    def submit_best(self, name: str, score: int) -> Tuple[str, Optional[Ranking]]:
        """Keep ``score`` only if it beats the stored one.

        The insert relies on the unique constraint on ``name`` and the update
        is conditional on the stored score being lower, so concurrent
        submissions can neither duplicate a name nor lower a score.
        """

        record: Optional[Ranking] = Ranking(name=name, score=score)
        with self._query("saving ranking"):
            try:
                self.session.add(record)
                self.session.commit()
            except IntegrityError:
                # name already taken
                self.session.rollback()
                record = None
            else:
                self.session.refresh(record)
        if record is not None:
            return CREATED, record

        with self._query("saving ranking"):
            result = self.session.exec(
                update(Ranking)
                .where(Ranking.name == name, Ranking.score < score)
                .values(score=score, timestamp=utcnow())
            )
            changed = result.rowcount == 1
            self.session.commit()
        if not changed:
            return NOT_UPDATED, None
        return UPDATED, self.find_by_name(name)

    def delete_all(self) -> int:
        """Remove every record. Returns the number of rows deleted."""

        with self._query("resetting rankings"):
            result = self.session.exec(delete(Ranking))
            self.session.commit()
        return result.rowcount


__all__ = [
    "CREATED",
    "DEFAULT_LIMIT",
    "NOT_UPDATED",
    "RankingStore",
    "UPDATED",
    "initialize",
]
