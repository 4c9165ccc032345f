"""
Repository Endpoints - The authenticated user's GitHub repositories.
"""

from fastapi import APIRouter, Depends

from repodoc.core.dependencies import get_github_client
from repodoc.models.responses import ErrorResponse, RepositoryListResponse
from repodoc.services.github_client import GitHubClient
from repodoc.services.repo_service import RepoService


router = APIRouter(prefix="/github", tags=["GitHub"])


@router.get(
    "/repositories",
    response_model=RepositoryListResponse,
    summary="List Repositories",
    description="Up to 100 repositories of the linked account, most recently updated first",
    responses={
        400: {"model": ErrorResponse, "description": "GitHub not connected"},
        401: {"model": ErrorResponse, "description": "Missing or invalid credential"}
    }
)
async def list_repositories(
    github: GitHubClient = Depends(get_github_client)
) -> RepositoryListResponse:
    repositories = await RepoService(github).list_user_repositories(per_page=100)
    return RepositoryListResponse(repositories=repositories)
