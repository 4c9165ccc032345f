"""
Data Models for repodoc
=======================

Organized into three categories:
- schemas: Core domain models used across the application
- requests: API request validation models
- responses: API response models
"""

from repodoc.models.schemas import (
    RepositoryMetadata,
    FileEntry,
    FileWithContent,
    AnalysisResult,
    RepositorySummary,
    UserRecord,
)

from repodoc.models.requests import (
    AnalyzeRequest,
    GenerateReadmeRequest,
)

from repodoc.models.responses import (
    HealthResponse,
    ReadmeResponse,
    RepositoryListResponse,
    LinkedUser,
    AuthResponse,
    ErrorResponse,
)

__all__ = [
    # Schemas
    "RepositoryMetadata",
    "FileEntry",
    "FileWithContent",
    "AnalysisResult",
    "RepositorySummary",
    "UserRecord",
    # Requests
    "AnalyzeRequest",
    "GenerateReadmeRequest",
    # Responses
    "HealthResponse",
    "ReadmeResponse",
    "RepositoryListResponse",
    "LinkedUser",
    "AuthResponse",
    "ErrorResponse",
]
