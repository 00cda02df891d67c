"""
Agent LLM: OpenAI chat completions client.

One AsyncOpenAI client is built at startup and shared by every agent. Retries
are disabled so a failed call surfaces immediately as a ProviderError.
"""

import logging

from openai import AsyncOpenAI

from article_pipeline.core.config import Settings

logger = logging.getLogger(__name__)


def create_completion_client(settings: Settings) -> AsyncOpenAI:
    """Build the shared OpenAI client from settings."""
    logger.info("[llm] creating OpenAI client model=%s timeout=%.1f", settings.openai_model, settings.llm_timeout)
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.llm_timeout,
        max_retries=0,
    )
