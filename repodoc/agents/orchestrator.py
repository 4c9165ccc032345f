"""
Orchestrator - Coordinates the repository pipeline.

COMPLETE FLOW:
==============
1. Owner + repo, authenticated GitHub client
        │
        ▼
2. REPOSITORY FETCHER
   - Metadata + root listing at the default branch
        │
        ▼
3. KEY-FILE SELECTOR
   - Allow-listed files, first N in listing order
        │
        ▼
4. CONTENT MATERIALIZER
   - Concurrent fetch + base64 decode, placeholder per failed file
        │
        ▼
5. ANALYSIS AGENT
   - Free-form analysis, placeholder on failure
        │
        ▼
6. AnalysisResult

README generation runs separately on a finished AnalysisResult.
"""

import logging

from repodoc.agents.analyst import ANALYSIS_PLACEHOLDER, AnalysisAgent
from repodoc.agents.readme_writer import ReadmeAgent
from repodoc.core.config import Settings
from repodoc.models.schemas import AnalysisResult
from repodoc.services.completion import CompletionClient
from repodoc.services.github_client import GitHubClient
from repodoc.services.key_files import select_key_files
from repodoc.services.materializer import ContentMaterializer
from repodoc.services.repo_service import RepoService

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Runs the analyze and generate-readme pipelines.

    Stages run once each, in order; nothing downstream of the repository
    lookup can fail the request.
    """

    def __init__(
        self,
        llm_client: CompletionClient,
        max_key_files: int = 10,
        content_chars: int = 1000,
        fetch_concurrency: int = 10,
        summary_concurrency: int = 1,
    ):
        self.max_key_files = max_key_files
        self.fetch_concurrency = fetch_concurrency
        self.analyst = AnalysisAgent(llm_client, content_chars=content_chars)
        self.readme_writer = ReadmeAgent(llm_client, summary_concurrency=summary_concurrency)

    @classmethod
    def from_settings(cls, llm_client: CompletionClient, settings: Settings) -> "Orchestrator":
        return cls(
            llm_client,
            max_key_files=settings.max_key_files,
            content_chars=settings.analysis_content_chars,
            fetch_concurrency=settings.fetch_concurrency,
            summary_concurrency=settings.summary_concurrency,
        )

    async def analyze(self, github: GitHubClient, owner: str, repo: str) -> AnalysisResult:
        """
        Analyze ``owner/repo``.

        Raises:
            RepositoryNotFoundError, AuthError, UpstreamError: from the fetch step only.
        """
        fetched = await RepoService(github).fetch(owner, repo)

        selected = select_key_files(fetched.listing, self.max_key_files)
        logger.info(f"Selected {len(selected)} key files for {owner}/{repo}")

        materializer = ContentMaterializer(github, concurrency=self.fetch_concurrency)
        files = await materializer.materialize(selected)

        result = await self.analyst.analyze(fetched.metadata, files)

        return AnalysisResult.build(
            fetched.metadata,
            files,
            result.value_or(ANALYSIS_PLACEHOLDER),
        )

    async def generate_readme(self, analysis: AnalysisResult) -> str:
        return await self.readme_writer.generate(analysis)
