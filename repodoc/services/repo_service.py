"""
Repository Service - Fetches what the pipeline needs to know about a repository.

Handles:
- Repository metadata lookup
- Root contents listing at the default branch
- The authenticated user's repository list
"""

import logging
from dataclasses import dataclass, field
from typing import List

from repodoc.models.schemas import FileEntry, RepositoryMetadata, RepositorySummary
from repodoc.services.github_client import GitHubClient

logger = logging.getLogger(__name__)


@dataclass
class FetchedRepository:
    """Metadata plus the root listing of one repository."""
    metadata: RepositoryMetadata
    listing: List[FileEntry] = field(default_factory=list)


class RepoService:
    """
    Repository Fetcher.

    Every call is a single round trip per GitHub endpoint; errors propagate
    from ``GitHubClient`` unchanged (RepositoryNotFoundError, AuthError,
    UpstreamError).
    """

    def __init__(self, github: GitHubClient):
        self.github = github

    async def fetch(self, owner: str, repo: str) -> FetchedRepository:
        """Fetch metadata, then the root listing at the default branch."""
        repo_data = await self.github.get_repository(owner, repo)
        metadata = RepositoryMetadata.from_github(repo_data)

        contents = await self.github.list_contents(owner, repo, ref=metadata.default_branch)
        listing = [
            FileEntry(
                name=item.get("name", ""),
                path=item.get("path", ""),
                url=item.get("url") or "",
                type=item.get("type", "file"),
            )
            for item in contents
            if isinstance(item, dict)
        ]

        logger.info(f"Fetched {owner}/{repo}: {len(listing)} root entries")
        return FetchedRepository(metadata=metadata, listing=listing)

    async def list_user_repositories(self, per_page: int = 100) -> List[RepositorySummary]:
        """Repositories of the token owner, sorted by last update."""
        items = await self.github.list_user_repositories(per_page=per_page)
        return [
            RepositorySummary(
                id=item["id"],
                name=item.get("name", ""),
                full_name=item.get("full_name", ""),
                description=item.get("description"),
                html_url=item.get("html_url", ""),
                language=item.get("language"),
                updated_at=item.get("updated_at"),
                private=bool(item.get("private", False)),
                fork=bool(item.get("fork", False)),
            )
            for item in items
        ]
