"""
Analysis Endpoints - Repository analysis and README generation.

- POST /analyze-repo     owner + repo → AnalysisResult
- POST /generate-readme  AnalysisResult → {readme}
"""

import logging

from fastapi import APIRouter, Depends

from repodoc.agents.orchestrator import Orchestrator
from repodoc.core.dependencies import get_github_client, get_orchestrator
from repodoc.models.requests import AnalyzeRequest, GenerateReadmeRequest
from repodoc.models.responses import ErrorResponse, ReadmeResponse
from repodoc.models.schemas import AnalysisResult
from repodoc.services.github_client import GitHubClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze-repo",
    response_model=AnalysisResult,
    summary="Analyze Repository",
    description="Fetch key files of a GitHub repository and analyze them",
    responses={
        200: {"description": "Analysis completed"},
        400: {"model": ErrorResponse, "description": "Bad input or GitHub not connected"},
        401: {"model": ErrorResponse, "description": "Missing or invalid credential"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        500: {"model": ErrorResponse, "description": "GitHub API failure"}
    }
)
async def analyze_repository(
    request: AnalyzeRequest,
    github: GitHubClient = Depends(get_github_client),
    orchestrator: Orchestrator = Depends(get_orchestrator)
) -> AnalysisResult:
    """
    Analyze a repository.

    This endpoint:
    1. Looks up the repository and its root listing
    2. Picks the documentation-relevant files
    3. Downloads their contents
    4. Asks the model for an analysis

    Anything after step 1 degrades to placeholders instead of failing.
    """
    logger.info(f"Analyzing {request.owner}/{request.repo}")
    return await orchestrator.analyze(github, request.owner, request.repo)


@router.post(
    "/generate-readme",
    response_model=ReadmeResponse,
    summary="Generate README",
    description="Generate a Markdown README from a previous analysis",
    responses={
        400: {"model": ErrorResponse, "description": "Analysis data missing"}
    }
)
async def generate_readme(
    request: GenerateReadmeRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator)
) -> ReadmeResponse:
    """
    Generate a README.

    Falls back to a template README when the model is unavailable.
    """
    readme = await orchestrator.generate_readme(request.analysis)
    return ReadmeResponse(readme=readme)
