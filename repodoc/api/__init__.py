"""
API Layer - FastAPI routes and middleware.
"""

from repodoc.api.routes import (
    health_router,
    analysis_router,
    repositories_router,
    auth_router,
)

__all__ = [
    "health_router",
    "analysis_router",
    "repositories_router",
    "auth_router",
]
