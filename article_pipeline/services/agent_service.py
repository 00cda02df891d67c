"""
Agent pipeline: search context → Researcher → Writer.

Responsibility: Run the three stages strictly in sequence for one query and
return the Writer's article. Any AgentError propagates unchanged; there are
no partial results. Called by the API; no HTTP here.
"""

import logging

import httpx
from openai import AsyncOpenAI

from article_pipeline.agent.researcher import Researcher
from article_pipeline.agent.writer import Writer
from article_pipeline.core.config import Settings
from article_pipeline.services.search_service import SearchContextProvider

logger = logging.getLogger(__name__)


class Orchestrator:
    """Holds one Researcher and one Writer, shared across concurrent requests."""

    def __init__(self, researcher: Researcher, writer: Writer) -> None:
        self.researcher = researcher
        self.writer = writer

    async def run(self, query: str) -> str:
        logger.info("[pipeline:run] START query=%r", query)
        summary = await self.researcher.research(query)
        logger.info("[pipeline:run] %s done summary_len=%d", self.researcher.name, len(summary))
        article = await self.writer.prompt(query, summary)
        logger.info("[pipeline:run] END %s done article_len=%d", self.writer.name, len(article))
        return article


def build_orchestrator(settings: Settings, completion_client: AsyncOpenAI, search_client: httpx.AsyncClient) -> Orchestrator:
    """Wire both agents onto the shared clients. Called once at startup."""
    provider = SearchContextProvider(search_client, search_url=settings.search_url)
    researcher = Researcher(
        completion_client,
        provider,
        system_instruction=settings.researcher_instruction,
        model=settings.openai_model,
    )
    writer = Writer(
        completion_client,
        system_instruction=settings.writer_instruction,
        model=settings.openai_model,
    )
    return Orchestrator(researcher, writer)
