"""Database model exports."""

from .ranking import Ranking

__all__ = ["Ranking"]
