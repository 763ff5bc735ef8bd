"""
FastAPI application entry-point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.errors import MethodNotAllowedError, SearchError
from app.routers import health, search

settings = get_settings()

# ── Logging ─────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── App ─────────────────────────────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Errors ──────────────────────────────────────────────────────────────────
def _error_response(exc: SearchError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


@app.exception_handler(SearchError)
async def search_error_handler(request: Request, exc: SearchError):
    return _error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # Routing raises 405 for every method a route does not declare, OPTIONS included
    if exc.status_code == 405:
        return _error_response(MethodNotAllowedError(), headers=exc.headers)
    return await http_exception_handler(request, exc)


# ── Routers ─────────────────────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(search.router)
