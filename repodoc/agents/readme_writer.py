"""
README Agent - Turns an analysis into a Markdown README.

FLOW:
1. Phase A: summarize each file on its own (best effort, one line per file)
2. Phase B: one synthesis call over metadata plus the per-file summaries
3. Any Phase B failure falls back to the template README
"""

import logging
from typing import List

from repodoc.agents.base import AgentRole, BaseAgent
from repodoc.agents.fallback import build_fallback_readme
from repodoc.agents.prompts import FILE_SUMMARY_PROMPT, README_PROMPT
from repodoc.models.schemas import AnalysisResult, FileWithContent
from repodoc.services.completion import CompletionClient
from repodoc.services.concurrency import bounded_gather

logger = logging.getLogger(__name__)

EMPTY_FILE_NOTE = "(empty file)"
FAILED_FILE_NOTE = "(failed to analyze)"


class ReadmeAgent(BaseAgent):
    """
    Writes README documents.

    Per-file summaries run with at most ``summary_concurrency`` requests in
    flight (1 keeps them strictly sequential); their order in the summary
    block always follows the file order.
    """

    role = AgentRole.README_WRITER

    def __init__(self, llm_client: CompletionClient, summary_concurrency: int = 1):
        super().__init__(llm_client)
        self.summary_concurrency = summary_concurrency

    async def generate(self, analysis: AnalysisResult) -> str:
        """Generate the README; never raises for model failures."""
        summary = await self.summarize_files(analysis.files)

        result = await self._try_llm(self.build_prompt(analysis, summary))
        if result.success:
            return result.data

        logger.warning(f"README synthesis failed, using template: {result.error}")
        return build_fallback_readme(analysis)

    async def summarize_file(self, file: FileWithContent) -> str:
        """One bullet line describing ``file``."""
        if not file.content:
            return f"- {file.name}: {EMPTY_FILE_NOTE}"

        prompt = FILE_SUMMARY_PROMPT.format(name=file.name, content=file.content)
        result = await self._try_llm(prompt)
        if not result.success:
            logger.warning(f"File summary failed for {file.name}: {result.error}")
            return f"- {file.name}: {FAILED_FILE_NOTE}"
        return f"- {file.name}: {result.data}"

    async def summarize_files(self, files: List[FileWithContent]) -> str:
        lines = await bounded_gather(files, self.summarize_file, self.summary_concurrency)
        return "\n".join(lines)

    def build_prompt(self, analysis: AnalysisResult, summary: str) -> str:
        return README_PROMPT.format(
            name=analysis.name or "Untitled Project",
            description=analysis.description or "No description provided",
            language=analysis.language or "Unknown",
            topics=", ".join(analysis.topics) if analysis.topics else "Not specified",
            summary=summary,
        )
