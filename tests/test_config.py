"""
Tests for Config loading and service wiring.
"""

import httpx
import pytest

from ideaspark.factory import create_idea_service
from ideaspark.models.idea import IdeaSource
from ideaspark.models.profile import UserProfile
from ideaspark.services.anthropic_service import AnthropicService
from ideaspark.utils.config import Config

CONFIG_ENV_VARS = [
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_API_URL",
    "ANTHROPIC_MODEL",
    "ANTHROPIC_VERSION",
    "ANTHROPIC_MAX_TOKENS",
    "ANTHROPIC_TEMPERATURE",
    "ANTHROPIC_TIMEOUT",
    "IDEA_COUNT",
    "IDEASPARK_ENV",
    "IDEASPARK_SETTINGS_FILE",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Fixture running each test from an empty directory with no settings in the environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def profile():
    return UserProfile(interests=["Technology"], skills=["Programming"])


class TestConfig:
    """Tests for Config."""

    def test_defaults(self, clean_env):
        config = Config()

        assert config.api_key == ""
        assert config.api_url == "https://api.anthropic.com/v1/messages"
        assert config.model == "claude-3-sonnet-20240229"
        assert config.max_tokens == 4000
        assert config.temperature == 0.7
        assert config.timeout == 30.0
        assert config.idea_count == 4

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setenv("ANTHROPIC_MODEL", "claude-test")
        monkeypatch.setenv("ANTHROPIC_TIMEOUT", "12.5")

        config = Config()

        assert config.api_key == "sk-test"
        assert config.model == "claude-test"
        assert config.timeout == 12.5

    def test_invalid_number_falls_back_to_default(self, clean_env, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "lots")
        assert Config().max_tokens == 4000

    def test_settings_file(self, clean_env, monkeypatch):
        (clean_env / "ideaspark.yaml").write_text("ai:\n  model: claude-from-file\n  timeout: 15\n")
        monkeypatch.setenv("ANTHROPIC_TIMEOUT", "20")

        config = Config()

        assert config.model == "claude-from-file"
        assert config.timeout == 20.0

    def test_dotenv_file(self, clean_env, monkeypatch):
        (clean_env / ".env").write_text("ANTHROPIC_API_KEY=sk-from-dotenv\n")
        # load_dotenv writes into os.environ; register the key so monkeypatch restores it
        monkeypatch.setenv("ANTHROPIC_API_KEY", "")
        monkeypatch.delenv("ANTHROPIC_API_KEY")

        assert Config().api_key == "sk-from-dotenv"


class TestFactory:
    """Tests for create_idea_service."""

    def test_service_is_wired_from_config(self, clean_env, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setenv("IDEA_COUNT", "3")

        service = create_idea_service(Config())

        assert isinstance(service.ai_service, AnthropicService)
        assert service.ai_service.api_key == "sk-test"
        assert service.ai_service.is_configured
        assert service.idea_count == 3

    def test_unconfigured_service(self, clean_env):
        assert not create_idea_service(Config()).ai_service.is_configured

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_non_positive_idea_count_uses_default(self, clean_env, monkeypatch, value):
        monkeypatch.setenv("IDEA_COUNT", value)
        assert Config().idea_count == 4

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_model_ideas_survive_non_positive_idea_count(self, clean_env, monkeypatch, profile, value):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setenv("IDEA_COUNT", value)
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"content": [{"type": "text", "text": '[{"title": "A"}]'}]})
        )

        result = create_idea_service(Config(), transport=transport).generate_with_source(profile)

        assert result.source is IdeaSource.AI
        assert [idea.title for idea in result.ideas] == ["A"]
