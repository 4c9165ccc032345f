"""
API Request Models - Pydantic models for request validation.
"""

from pydantic import BaseModel, Field, field_validator
import re

from repodoc.models.schemas import AnalysisResult


_GITHUB_NAME = re.compile(r"^[\w\-\.]+$")


class AnalyzeRequest(BaseModel):
    """
    Request to analyze a repository.

    Example:
        {
            "owner": "fastapi",
            "repo": "fastapi"
        }
    """
    owner: str = Field(
        ...,
        description="Repository owner (user or organization)",
        examples=["fastapi"]
    )
    repo: str = Field(
        ...,
        description="Repository name",
        examples=["fastapi"]
    )

    @field_validator("owner", "repo")
    @classmethod
    def validate_github_name(cls, v: str) -> str:
        """Owner and repo must be plain GitHub path segments."""
        v = v.strip()
        if not v:
            raise ValueError("Owner and repo are required")
        if not _GITHUB_NAME.match(v):
            raise ValueError("Invalid GitHub name")
        return v


class GenerateReadmeRequest(BaseModel):
    """
    Request to generate a README from a previous analysis.

    Example:
        {
            "analysis": {"name": "demo", "files": [...], "analysis": "..."}
        }
    """
    analysis: AnalysisResult = Field(
        ...,
        description="Result returned by the analyze endpoint"
    )
