"""Exceptions raised by the ranking service layer."""

from __future__ import annotations


class RankingError(Exception):
    """Base class for ranking failures."""


class InvalidSubmission(RankingError):
    """Submitted name or score failed validation."""


class ResetForbidden(RankingError):
    """Reset secret did not match the configured one."""


class StoreError(RankingError):
    """Query or connectivity failure in the ranking store."""


__all__ = ["InvalidSubmission", "RankingError", "ResetForbidden", "StoreError"]
