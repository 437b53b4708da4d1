"""Ranking endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse

from ...core import isoformat_utc
from ...models import Ranking
from ...services import (
    InvalidSubmission,
    RankingService,
    ResetForbidden,
    StoreError,
)
from ..deps import get_ranking_service

router = APIRouter(tags=["rankings"])


def _ranking_to_dict(record: Ranking) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "score": record.score,
        "timestamp": isoformat_utc(record.timestamp),
    }


def _field(body: Any, key: str) -> Any:
    return body.get(key) if isinstance(body, dict) else None


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/rankings")
def get_rankings(
    service: RankingService = Depends(get_ranking_service),
) -> List[Dict[str, Any]]:
    """Top ten players by best score."""

    try:
        return service.get_top_rankings()
    except StoreError:
        raise HTTPException(500, "Failed to fetch rankings")


@router.post("/rankings")
def submit_ranking(
    body: Any = Body(None),
    service: RankingService = Depends(get_ranking_service),
):
    """Submit a score; only a player's best score is kept."""

    try:
        result = service.submit_score(_field(body, "name"), _field(body, "score"))
    except InvalidSubmission:
        raise HTTPException(400, "Valid name and score are required.")
    except StoreError:
        raise HTTPException(500, "Failed to save ranking")

    if result.record is None:
        return {"message": result.outcome}

    status_code = 201 if result.created else 200
    return JSONResponse(_ranking_to_dict(result.record), status_code=status_code)


@router.post("/rankings/reset")
def reset_rankings(
    body: Any = Body(None),
    service: RankingService = Depends(get_ranking_service),
) -> Dict[str, str]:
    """Delete every ranking. Requires the admin reset password."""

    try:
        message = service.reset_all(_field(body, "password"))
    except ResetForbidden:
        raise HTTPException(403, "Incorrect password.")
    except StoreError:
        raise HTTPException(500, "Failed to reset rankings")
    return {"message": message}


__all__ = ["router"]
