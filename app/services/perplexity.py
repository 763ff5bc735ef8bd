"""
Perplexity service – thin wrapper around the chat-completions HTTP API.
Keeps all upstream interaction in one place so routers only deal with
validated input and parsed output.
"""

import logging
from typing import Any

import requests

from app.config import Settings, get_settings
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "API request failed"


def _headers(settings: Settings) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.perplexity_api_key}",
        "Content-Type": "application/json",
    }


def build_payload(
    query: str,
    *,
    system_prompt: str | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Compose the chat-completions body for a single query."""
    settings = settings or get_settings()
    return {
        "model": settings.perplexity_model,
        "messages": [
            {
                "role": "system",
                "content": system_prompt or settings.default_system_prompt,
            },
            {"role": "user", "content": query},
        ],
        "search_domain_filter": [settings.perplexity_search_domain],
        "temperature": settings.perplexity_temperature,
        "max_tokens": settings.perplexity_max_tokens,
        "stream": False,
    }


def _error_message(response: requests.Response) -> str:
    """Pull ``error.message`` out of an upstream error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return FALLBACK_ERROR


# ── Public helpers ──────────────────────────────────────────────────────────


def search(
    query: str,
    *,
    system_prompt: str | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """
    Send one chat-completions request and return the parsed response body.

    Raises ``UpstreamError`` with the upstream status on a non-2xx reply.
    Network failures propagate as ``requests.RequestException``.
    """
    settings = settings or get_settings()
    payload = build_payload(query, system_prompt=system_prompt, settings=settings)

    logger.info(
        "Invoking Perplexity model=%s domain=%s query_len=%d",
        settings.perplexity_model,
        settings.perplexity_search_domain,
        len(query),
    )

    response = requests.post(
        settings.perplexity_api_url,
        headers=_headers(settings),
        json=payload,
        timeout=settings.perplexity_timeout,
    )

    if not 200 <= response.status_code < 300:
        message = _error_message(response)
        logger.warning(
            "Perplexity request failed  status=%d  error=%s",
            response.status_code,
            message,
        )
        raise UpstreamError(message, response.status_code)

    return response.json()


# ── Response parsing ────────────────────────────────────────────────────────


def extract_content(response_body: dict[str, Any]) -> Any:
    """Return the first choice's message content, relayed as-is."""
    choices = response_body.get("choices") or []
    if not choices:
        raise ValueError("Upstream response contained no choices")
    message = choices[0].get("message")
    if not message or "content" not in message:
        raise ValueError("Upstream response choice has no message content")
    return message["content"]


def extract_usage(response_body: dict[str, Any]) -> Any:
    return response_body.get("usage")
