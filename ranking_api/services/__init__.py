"""Service layer helpers."""

from .errors import InvalidSubmission, RankingError, ResetForbidden, StoreError
from .rankings import RESET_CONFIRMATION, RankingService, SubmissionResult
from .store import CREATED, NOT_UPDATED, UPDATED, RankingStore, initialize

__all__ = [
    "CREATED",
    "InvalidSubmission",
    "NOT_UPDATED",
    "RESET_CONFIRMATION",
    "RankingError",
    "RankingService",
    "RankingStore",
    "ResetForbidden",
    "StoreError",
    "SubmissionResult",
    "UPDATED",
    "initialize",
]
