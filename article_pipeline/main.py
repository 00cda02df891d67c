# Run from project root: uvicorn article_pipeline.main:app --reload

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from article_pipeline.agent.llm import create_completion_client
from article_pipeline.api.handlers import agent_error_handler
from article_pipeline.api.routes import router
from article_pipeline.core.config import load_settings
from article_pipeline.core.errors import AgentError, ConfigurationError
from article_pipeline.services.agent_service import build_orchestrator
from article_pipeline.services.search_service import create_search_client

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build settings, shared clients, and the pipeline once; close clients on shutdown."""
    app.state.orchestrator = None
    app.state.config_error = None
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("Pipeline not configured: %s", e)
        app.state.config_error = e.reason
        yield
        return

    completion_client = create_completion_client(settings)
    search_client = create_search_client(settings)
    app.state.orchestrator = build_orchestrator(settings, completion_client, search_client)
    logger.info("Research/writer pipeline ready (model=%s)", settings.openai_model)
    try:
        yield
    finally:
        app.state.orchestrator = None
        await search_client.aclose()
        await completion_client.close()


app = FastAPI(title="Research Writer Backend", lifespan=lifespan)
app.include_router(router)
app.add_exception_handler(AgentError, agent_error_handler)
