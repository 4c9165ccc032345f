"""
Analysis Agent - Produces the free-form analysis of a repository sample.

FLOW:
1. Receive repository metadata and the materialized key files
2. Embed them in the analysis prompt, each file cut to a character budget
3. One completion call; the answer is kept verbatim
"""

import logging
from typing import List

from repodoc.agents.base import AgentRole, BaseAgent, StageResult
from repodoc.agents.prompts import ANALYSIS_PROMPT
from repodoc.models.schemas import FileWithContent, RepositoryMetadata
from repodoc.services.completion import CompletionClient

logger = logging.getLogger(__name__)

ANALYSIS_PLACEHOLDER = "AI analysis could not be generated at this time."

DEFAULT_CONTENT_CHARS = 1000


class AnalysisAgent(BaseAgent):
    """Asks the model for an analysis of a repository."""

    role = AgentRole.ANALYST

    def __init__(self, llm_client: CompletionClient, content_chars: int = DEFAULT_CONTENT_CHARS):
        super().__init__(llm_client)
        self.content_chars = content_chars

    async def analyze(
        self,
        metadata: RepositoryMetadata,
        files: List[FileWithContent]
    ) -> StageResult[str]:
        """
        Generate the analysis text.

        Returns:
            StageResult holding the model's raw text, or the failure reason.
        """
        prompt = self.build_prompt(metadata, files)
        result = await self._try_llm(prompt)
        if not result.success:
            logger.warning(f"Analysis of {metadata.name} failed: {result.error}")
        return result

    def build_prompt(self, metadata: RepositoryMetadata, files: List[FileWithContent]) -> str:
        file_contents = "\n\n".join(
            f"File: {f.name}\nContent:\n{f.content[:self.content_chars]}"
            for f in files
        )
        return ANALYSIS_PROMPT.format(
            name=metadata.name,
            description=metadata.description or "No description",
            language=metadata.language,
            topics=", ".join(metadata.topics) or "None",
            files=file_contents,
        )
