"""
API Response Models - Pydantic models for API responses.
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from repodoc.models.schemas import RepositorySummary


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    environment: str
    timestamp: datetime = Field(default_factory=_utcnow)


class ReadmeResponse(BaseModel):
    """
    Generated README.

    Example:
        {
            "readme": "# demo\\n\\n..."
        }
    """
    readme: str


class RepositoryListResponse(BaseModel):
    """Repositories of the authenticated user, most recently updated first."""
    repositories: List[RepositorySummary] = Field(default_factory=list)


class LinkedUser(BaseModel):
    id: str
    email: str = ""
    github_username: Optional[str] = None


class AuthResponse(BaseModel):
    """
    Response after linking a GitHub account.

    Example:
        {
            "message": "GitHub login successful",
            "token": "eyJ...",
            "user": {"id": "...", "email": "...", "github_username": "octocat"}
        }
    """
    message: str = "GitHub login successful"
    token: str
    user: LinkedUser


class ErrorResponse(BaseModel):
    """
    Standard error response.

    Example:
        {
            "success": false,
            "error": "Repository not found",
            "error_code": "REPO_NOT_FOUND"
        }
    """
    success: bool = False
    error: str
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)
