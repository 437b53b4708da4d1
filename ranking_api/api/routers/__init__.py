"""API routers."""

from .rankings import router as rankings_router

__all__ = ["rankings_router"]
