"""
Base classes for the model-backed stages.

Every agent talks to the completion service through ``_call_llm`` and reports
degradable outcomes as ``StageResult`` values.
"""

from abc import ABC
from enum import Enum
from typing import Optional

from repodoc.core.exceptions import CompletionError
from repodoc.core.result import StageResult
from repodoc.services.completion import CompletionClient


class AgentRole(Enum):
    """Defines the role of each agent in the system."""
    ANALYST = "analyst"
    README_WRITER = "readme_writer"


class BaseAgent(ABC):
    """
    Base class for all agents.

    - AnalysisAgent: Produces free-form analysis of a repository sample
    - ReadmeAgent: Summarizes files and writes the README
    """

    role: AgentRole

    def __init__(self, llm_client: CompletionClient):
        """
        Initialize agent with a completion client.

        Args:
            llm_client: Client for making completion calls
        """
        self.llm = llm_client

    async def _call_llm(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        return await self.llm.generate(prompt, system_prompt)

    async def _try_llm(self, prompt: str, system_prompt: Optional[str] = None) -> StageResult[str]:
        """Call the model once and capture any failure as a StageResult."""
        try:
            return StageResult.ok(await self._call_llm(prompt, system_prompt))
        except CompletionError as e:
            return StageResult.failed(e.message)
        except Exception as e:
            return StageResult.failed(str(e))


__all__ = ["AgentRole", "BaseAgent", "StageResult"]
