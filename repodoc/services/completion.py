"""
Completion Service - Single-turn prompt in, text out.

Backed by Google Gemini through ``google-genai``. Any failure, including an
empty answer, surfaces as ``CompletionError``; callers decide how to degrade.
"""

import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types

from repodoc.core.exceptions import CompletionError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that can turn a prompt into text."""

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        ...


class GeminiCompletionClient:
    """Completion client for Gemini models."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        client: Optional[genai.Client] = None,
    ):
        self.model = model
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> genai.Client:
        """Lazy-create the SDK client so a missing key only fails at call time."""
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        config = None
        if system_prompt:
            config = types.GenerateContentConfig(system_instruction=system_prompt)

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            logger.warning(f"Gemini request failed: {e}")
            raise CompletionError(f"Completion request failed: {e}") from e

        text = response.text
        if not text:
            raise CompletionError("Completion returned no text")
        return text
