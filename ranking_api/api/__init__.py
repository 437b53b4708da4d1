"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .deps import get_ranking_service, get_settings
from .routers import rankings_router

_BAD_BODY_DETAIL = {
    "/rankings": "Valid name and score are required.",
    "/rankings/reset": "Malformed request body.",
}


async def _bad_request_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable JSON is a client input error like any other malformed submission.
    detail = _BAD_BODY_DETAIL.get(request.url.path, "Malformed request body.")
    return JSONResponse({"detail": detail}, status_code=400)


def register_routes(app: FastAPI) -> None:
    """Attach the ranking router and map body parse failures to 400."""

    app.add_exception_handler(RequestValidationError, _bad_request_body)
    app.include_router(rankings_router)


__all__ = ["get_ranking_service", "get_settings", "register_routes"]
