"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlmodel import Session

from ..core import Settings, get_session
from ..services import RankingService, RankingStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ranking_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> RankingService:
    """Build a service bound to the request's database session."""

    return RankingService(RankingStore(session), settings)


__all__ = ["get_ranking_service", "get_settings"]
