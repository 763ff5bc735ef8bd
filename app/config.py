"""
Application configuration via environment variables.
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    app_name: str = "PerplexitySearch"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # ── Perplexity ───────────────────────────────────────
    # Empty key is allowed at startup; the search route rejects it per request
    perplexity_api_key: str = ""
    perplexity_api_url: str = "https://api.perplexity.ai/chat/completions"
    perplexity_model: str = "sonar-pro"
    perplexity_search_domain: str = "idriesshahfoundation.org"
    perplexity_temperature: float = 0.7
    perplexity_max_tokens: int = 2000
    perplexity_timeout: float | None = None
    default_system_prompt: str = "You are a helpful assistant."

    # ── API Gateway ──────────────────────────────────────
    api_base_path: str = "/"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
