"""
Search router – POST /perplexity-search endpoint.
Validates the caller's query, forwards it to Perplexity with the server-held
key, and relays the answer.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.errors import (
    ConfigurationError,
    QueryValidationError,
    SearchError,
)
from app.schemas.search import ErrorResponse, SearchRequest, SearchResponse
from app.services.perplexity import extract_content, extract_usage, search

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])

SEARCH_PATH = "/perplexity-search"

SUCCESS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def _parse_body(raw: bytes) -> SearchRequest:
    payload: Any = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")

    try:
        body = SearchRequest.model_validate(payload)
    except ValidationError as exc:
        # Fields are checked in declaration order; only the first bad one is named
        field = exc.errors()[0]["loc"][0]
        raise QueryValidationError(f"{field} must be a string") from exc

    if not body.query:
        raise QueryValidationError("Query is required")
    return body


@router.post(
    SEARCH_PATH,
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Answer a query with a domain-restricted Perplexity search",
)
async def perplexity_search(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    try:
        body = _parse_body(await request.body())

        if not settings.perplexity_api_key:
            raise ConfigurationError("API key not configured")

        data = search(
            body.query,
            system_prompt=body.system_prompt,
            settings=settings,
        )
        result = SearchResponse(content=extract_content(data))
        # usage is relayed only when the upstream sends the key
        if "usage" in data:
            result.usage = extract_usage(data)
        logger.info("Perplexity search success  has_usage=%s", "usage" in data)
        return JSONResponse(
            content=result.model_dump(exclude_unset=True),
            headers=SUCCESS_HEADERS,
        )

    except SearchError:
        raise

    except Exception as exc:
        logger.exception("Function error")
        raise SearchError(str(exc)) from exc

