"""
Core Domain Schemas - Shared data models used across the application.
"""

from typing import Optional, List, Dict, Any
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RepositoryMetadata(BaseModel):
    """Descriptive fields of one hosted repository."""
    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str = ""
    description: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    stars: int = 0
    updated_at: Optional[str] = None
    default_branch: str = "main"

    @classmethod
    def from_github(cls, data: Dict[str, Any]) -> "RepositoryMetadata":
        """Build from a GitHub ``GET /repos/{owner}/{repo}`` payload."""
        return cls(
            name=data.get("name") or "",
            full_name=data.get("full_name") or "",
            description=data.get("description"),
            language=data.get("language"),
            topics=data.get("topics") or [],
            stars=data.get("stargazers_count") or 0,
            updated_at=data.get("updated_at"),
            default_branch=data.get("default_branch") or "main",
        )


class FileEntry(BaseModel):
    """One item of a repository contents listing."""
    name: str
    path: str
    url: str = ""
    type: str = "file"


class FileWithContent(BaseModel):
    """A selected file plus its materialized text."""
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def null_content_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class AnalysisResult(BaseModel):
    """
    The synthesized understanding of a repository.

    Serialized with snake_case names. ``aiAnalysis`` and ``updatedAt`` are
    accepted on input so camelCase payloads posted back to generate-readme
    still validate.
    """
    name: Optional[str] = None
    full_name: str = ""
    description: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    stars: int = 0
    updated_at: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
    )
    default_branch: str = "main"
    files: List[FileWithContent] = Field(default_factory=list)
    analysis: str = Field(
        default="",
        validation_alias=AliasChoices("analysis", "aiAnalysis"),
    )
    readme: str = ""

    @field_validator("topics", "files", mode="before")
    @classmethod
    def null_list_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("full_name", "analysis", "readme", mode="before")
    @classmethod
    def null_text_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("stars", mode="before")
    @classmethod
    def null_stars_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("default_branch", mode="before")
    @classmethod
    def null_branch_is_main(cls, v: Any) -> Any:
        return "main" if v is None else v

    @classmethod
    def build(
        cls,
        metadata: RepositoryMetadata,
        files: List[FileWithContent],
        analysis: str
    ) -> "AnalysisResult":
        return cls(**metadata.model_dump(), files=list(files), analysis=analysis)


class RepositorySummary(BaseModel):
    """One entry of the authenticated user's repository list."""
    id: int
    name: str
    full_name: str
    description: Optional[str] = None
    html_url: str = ""
    language: Optional[str] = None
    updated_at: Optional[str] = None
    private: bool = False
    fork: bool = False


class UserRecord(BaseModel):
    """A user linked to a GitHub account."""
    id: str
    email: str = ""
    github_id: Optional[str] = None
    github_username: Optional[str] = None
    github_access_token: Optional[str] = None
