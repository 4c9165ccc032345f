"""
Content Materializer - Downloads and decodes the selected files.

Each file is fetched independently; a failed fetch turns into a placeholder
for that file only and never fails the batch.
"""

import base64
import binascii
import logging
from typing import List

from repodoc.core.result import StageResult
from repodoc.models.schemas import FileEntry, FileWithContent
from repodoc.services.concurrency import bounded_gather
from repodoc.services.github_client import GitHubClient

logger = logging.getLogger(__name__)

FETCH_PLACEHOLDER = "Could not fetch content"


def decode_content(payload: dict) -> str:
    """
    Decode a contents-API file object into text.

    Raises:
        ValueError: The object has no base64 ``content``.
    """
    content = payload.get("content") if isinstance(payload, dict) else None
    if content is None:
        raise ValueError("Response has no content field")
    encoding = payload.get("encoding", "base64")
    if encoding != "base64":
        raise ValueError(f"Unsupported content encoding: {encoding}")
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, TypeError) as e:
        raise ValueError(f"Invalid base64 content: {e}") from e
    return raw.decode("utf-8", errors="replace")


class ContentMaterializer:
    """Fetches file contents through an authenticated GitHub client."""

    def __init__(self, github: GitHubClient, concurrency: int = 10):
        self.github = github
        self.concurrency = concurrency

    async def fetch_one(self, entry: FileEntry) -> StageResult[str]:
        """Fetch and decode one file."""
        try:
            payload = await self.github.get_file(entry.url)
            return StageResult.ok(decode_content(payload))
        except Exception as e:
            logger.warning(f"Could not fetch {entry.path}: {e}")
            return StageResult.failed(str(e))

    async def materialize(self, files: List[FileEntry]) -> List[FileWithContent]:
        """
        Fetch every entry concurrently and return them in input order.

        Output length always equals input length.
        """
        async def fetch(entry: FileEntry) -> FileWithContent:
            result = await self.fetch_one(entry)
            return FileWithContent(
                name=entry.name,
                path=entry.path,
                content=result.value_or(FETCH_PLACEHOLDER),
            )

        return await bounded_gather(files, fetch, self.concurrency)
