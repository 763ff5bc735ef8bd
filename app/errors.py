"""
Error kinds surfaced by the search function.

Each subclass carries the HTTP status it maps to; the app-level handler in
``app.main`` renders all of them as ``{"error": message}``.
"""


class SearchError(Exception):
    """Base class for errors returned to the caller as ``{"error": ...}``."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MethodNotAllowedError(SearchError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class QueryValidationError(SearchError):
    status_code = 400


class ConfigurationError(SearchError):
    status_code = 500


class UpstreamError(SearchError):
    """Non-2xx reply from Perplexity; status is mirrored from the upstream."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)
