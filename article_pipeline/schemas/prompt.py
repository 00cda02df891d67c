"""Schemas for the prompt endpoint."""

from pydantic import BaseModel, Field


class ArticleRequest(BaseModel):
    """Request body for POST /prompt. The response is the article as plain text."""

    q: str = Field(..., min_length=1, description="Short search query the article should be written about.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"q": "best hiking boots"}]
        }
    }


class HealthResponse(BaseModel):
    """Response for GET /health."""

    ok: bool = Field(True, description="Process is up.")
    configured: bool = Field(..., description="Both API keys were loaded and the pipeline is ready.")
