"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from article_pipeline.api.handlers import get_orchestrator, handle_prompt
from article_pipeline.schemas.prompt import ArticleRequest, HealthResponse
from article_pipeline.services.agent_service import Orchestrator

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"], response_class=PlainTextResponse)
def root() -> str:
    return "Hello, world!"


@router.get("/health", tags=["system"], response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    configured = getattr(request.app.state, "orchestrator", None) is not None
    return HealthResponse(ok=True, configured=configured)


# --- Prompt ---

@router.post(
    "/prompt",
    tags=["prompt"],
    response_class=PlainTextResponse,
    summary="Research a query and write an article about it",
    description="Search the web for q, summarize the results, and return an article as plain text. 422 on invalid body, 500 with the error message on any pipeline failure.",
)
async def post_prompt(
    body: ArticleRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
) -> PlainTextResponse:
    logger.info("[api:post_prompt] IN  q=%r", body.q)
    return await handle_prompt(orchestrator, body.q)
