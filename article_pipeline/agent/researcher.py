"""
Researcher agent: fetch search-result context for a query, then summarize it.
"""

import logging

from openai import AsyncOpenAI

from article_pipeline.agent.base import Agent
from article_pipeline.agent.prompts import RESEARCHER_SYSTEM
from article_pipeline.core.config import OPENAI_LLM_MODEL
from article_pipeline.services.search_service import SearchContextProvider

logger = logging.getLogger(__name__)


class Researcher(Agent):
    name = "Researcher"
    default_system_instruction = RESEARCHER_SYSTEM

    def __init__(
        self,
        client: AsyncOpenAI,
        context_provider: SearchContextProvider,
        system_instruction: str | None = None,
        model: str = OPENAI_LLM_MODEL,
    ) -> None:
        super().__init__(client, system_instruction=system_instruction, model=model)
        self._context_provider = context_provider

    async def fetch_context(self, query: str) -> str:
        return await self._context_provider.fetch_context(query)

    async def research(self, query: str) -> str:
        """Fetch context then summarize it; a failed fetch never reaches the model."""
        context = await self.fetch_context(query)
        logger.info("[agent:%s] context fetched context_len=%d", self.name, len(context))
        return await self.prompt(query, context)
