from types import SimpleNamespace
from unittest.mock import patch

import pytest

from config import settings as settings_module
from config.settings import DEFAULT_MODEL, get_env, get_settings
from services.llm_helper import LLMHelper
from tests.conftest import make_response

SETTING_VARS = [
    "ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "LLM_TIMEOUT_SECONDS",
    "LLM_MAX_TOKENS", "LOG_LEVEL", "LOG_DIR",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for var in SETTING_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings_module, "st", SimpleNamespace(secrets={}))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_get_env_prefers_environment_over_secrets(monkeypatch):
    monkeypatch.setattr(settings_module, "st", SimpleNamespace(secrets={"ANTHROPIC_MODEL": "from-secrets"}))
    monkeypatch.setenv("ANTHROPIC_MODEL", "from-env")

    assert get_env("ANTHROPIC_MODEL") == "from-env"


def test_get_env_falls_back_to_secrets(monkeypatch):
    monkeypatch.setattr(settings_module, "st", SimpleNamespace(secrets={"LLM_TIMEOUT_SECONDS": 12}))

    assert get_env("LLM_TIMEOUT_SECONDS", "30") == "12"


def test_get_env_default_when_missing_everywhere():
    assert get_env("ANTHROPIC_MODEL", "fallback") == "fallback"
    assert get_env("ANTHROPIC_MODEL") is None


def test_get_env_default_when_secrets_unavailable(monkeypatch):
    class NoSecrets:
        def __getitem__(self, key):
            raise FileNotFoundError("no secrets.toml")

    monkeypatch.setattr(settings_module, "st", SimpleNamespace(secrets=NoSecrets()))

    assert get_env("LOG_LEVEL", "INFO") == "INFO"


def test_default_settings():
    current = get_settings()

    assert current.anthropic_api_key is None
    assert current.anthropic_model == DEFAULT_MODEL
    assert current.llm_timeout_seconds == 30.0
    assert current.llm_max_tokens == 1000
    assert current.log_level == "INFO"
    assert current.log_dir == "logs"


def test_settings_overrides_from_environment(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-custom")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("LLM_MAX_TOKENS", "256")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    current = get_settings()

    assert current.anthropic_model == "claude-custom"
    assert current.llm_timeout_seconds == 12.5
    assert current.llm_max_tokens == 256
    assert current.log_level == "DEBUG"


def test_configured_timeout_and_model_reach_client(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-custom")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12")

    with patch("services.llm_helper.Anthropic") as anthropic_cls:
        anthropic_cls.return_value.messages.create.return_value = make_response("답변")
        helper = LLMHelper()

        assert helper.generate_advice("q", "c") == "답변"

    anthropic_cls.assert_called_once_with(api_key="sk-env", timeout=12.0, max_retries=0)
    kwargs = anthropic_cls.return_value.messages.create.call_args.kwargs
    assert kwargs["model"] == "claude-custom"
