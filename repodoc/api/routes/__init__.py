"""
API Routes - FastAPI route modules.
"""

from repodoc.api.routes.health import router as health_router
from repodoc.api.routes.analysis import router as analysis_router
from repodoc.api.routes.repositories import router as repositories_router
from repodoc.api.routes.auth import router as auth_router

__all__ = [
    "health_router",
    "analysis_router",
    "repositories_router",
    "auth_router",
]
