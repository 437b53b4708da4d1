"""Ranking service: validation, submission decisions and resets."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..core import Settings
from ..models import Ranking
from .errors import InvalidSubmission, ResetForbidden
from .store import CREATED, DEFAULT_LIMIT, RankingStore

logger = logging.getLogger(__name__)

RESET_CONFIRMATION = "Rankings have been reset."


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a score submission; ``record`` is ``None`` when nothing changed."""

    outcome: str
    record: Optional[Ranking] = None

    @property
    def created(self) -> bool:
        return self.outcome == CREATED


def validate_submission(name: Any, score: Any) -> Tuple[str, int]:
    """Return ``(name, score)`` with an integral score, or raise :class:`InvalidSubmission`."""

    if not isinstance(name, str) or not name:
        raise InvalidSubmission("name must be a non-empty string")
    # bool is an int subclass but never a score
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidSubmission("score must be an integer")
    if isinstance(score, float):
        if not score.is_integer():
            raise InvalidSubmission("score must be an integer")
        score = int(score)
    return name, score


class RankingService:
    def __init__(self, store: RankingStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def get_top_rankings(self) -> List[Dict[str, Any]]:
        return [
            {"name": record.name, "score": record.score}
            for record in self.store.top_scores(DEFAULT_LIMIT)
        ]

    def submit_score(self, name: Any, score: Any) -> SubmissionResult:
        """Record ``score`` for ``name`` if it is the player's best so far."""

        name, score = validate_submission(name, score)
        outcome, record = self.store.submit_best(name, score)
        if record is not None:
            logger.info("Ranking %s for %s: %d", outcome, name, score)
        return SubmissionResult(outcome=outcome, record=record)

    def reset_all(self, supplied_secret: Any) -> str:
        """Wipe every ranking when ``supplied_secret`` matches the admin secret."""

        if not isinstance(supplied_secret, str) or not hmac.compare_digest(
            supplied_secret.encode("utf-8"),
            self.settings.admin_reset_password.encode("utf-8"),
        ):
            logger.warning("Rejected rankings reset: incorrect password")
            raise ResetForbidden("Incorrect password.")

        deleted = self.store.delete_all()
        logger.info("Rankings reset, %d records removed", deleted)
        return RESET_CONFIRMATION


__all__ = [
    "RESET_CONFIRMATION",
    "RankingService",
    "SubmissionResult",
    "validate_submission",
]
