"""
Pydantic models for request / response validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# ── Requests ────────────────────────────────────────────────────────────────


class SearchRequest(BaseModel):
    """Body for the /perplexity-search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    # Optional at the schema level so a missing query maps to a 400, not a 422
    query: StrictStr | None = Field(
        default=None,
        description="User question forwarded to Perplexity.",
    )
    system_prompt: StrictStr | None = Field(
        default=None,
        alias="systemPrompt",
        description="Optional system prompt replacing the default persona.",
    )


# ── Responses ───────────────────────────────────────────────────────────────


class SearchResponse(BaseModel):
    """Successful search answer."""

    content: Any
    usage: Any = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ErrorResponse(BaseModel):
    error: str
