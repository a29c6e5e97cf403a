"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from .settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "GITHUB_BASE_URL", "GITHUB_USER_AGENT", "GITHUB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def describe_Settings():
    def it_has_defaults():
        settings = Settings(_env_file=None)

        assert settings.token is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.timeout == 30.0

    def it_reads_prefixed_environment_variables(monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        monkeypatch.setenv("GITHUB_BASE_URL", "https://github.example.com/api/v3")
        monkeypatch.setenv("GITHUB_TIMEOUT", "5")

        settings = Settings(_env_file=None)

        assert settings.token == "ghp_test"
        assert settings.base_url == "https://github.example.com/api/v3"
        assert settings.timeout == 5.0

    def it_reads_a_dotenv_file(tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GITHUB_TOKEN=from-file\n")

        assert Settings(_env_file=env_file).token == "from-file"

    def describe_validation():
        def it_rejects_a_relative_base_url():
            with pytest.raises(ValidationError, match="base_url"):
                Settings(_env_file=None, base_url="api.github.com")

        def it_rejects_a_non_positive_timeout():
            with pytest.raises(ValidationError):
                Settings(_env_file=None, timeout=0)

        def it_rejects_an_empty_user_agent():
            with pytest.raises(ValidationError):
                Settings(_env_file=None, user_agent="")
