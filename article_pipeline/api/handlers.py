"""
API handlers: look up the pipeline, run it, map pipeline errors to HTTP.

Responsibility: Bridge HTTP types and services. Lives in the API layer so
services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from article_pipeline.core.errors import AgentError, ConfigurationError
from article_pipeline.services.agent_service import Orchestrator

logger = logging.getLogger(__name__)


def get_orchestrator(request: Request) -> Orchestrator:
    """
    FastAPI dependency returning the pipeline built at startup.

    Raises a fresh ConfigurationError carrying the startup reason when
    settings could not be loaded, so the request fails with a 500 instead of
    the process refusing to start.
    """
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        reason = getattr(request.app.state, "config_error", None)
        raise ConfigurationError(reason or "pipeline is not initialised")
    return orchestrator


async def handle_prompt(orchestrator: Orchestrator, query: str) -> PlainTextResponse:
    article = await orchestrator.run(query)
    return PlainTextResponse(article)


async def agent_error_handler(request: Request, exc: AgentError) -> PlainTextResponse:
    """Every pipeline error kind maps to one 500 whose body is the error message."""
    logger.error("An error happened: %s (path=%s)", exc, request.url.path)
    return PlainTextResponse(str(exc), status_code=500)
