"""
Settings loading.
"""

from app.config import Settings


def test_defaults_match_fixed_call_parameters():
    settings = Settings(perplexity_api_key="")

    assert settings.perplexity_api_url == "https://api.perplexity.ai/chat/completions"
    assert settings.perplexity_model == "sonar-pro"
    assert settings.perplexity_temperature == 0.7
    assert settings.perplexity_max_tokens == 2000
    assert settings.perplexity_timeout is None


def test_only_read_settings_are_declared():
    assert "debug" not in Settings.model_fields
    assert "cors_origins" not in Settings.model_fields


def test_api_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("PERPLEXITY_API_KEY", "from-env")

    assert Settings().perplexity_api_key == "from-env"
