"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from ytmparse.config import ParserConfig, TransportConfig
from ytmparse.models import BatchPolicy
from ytmparse.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "YTMPARSE_COOKIES_FILE",
        "YTMPARSE_LANGUAGE",
        "YTMPARSE_LOCATION",
        "YTMPARSE_BATCH_POLICY",
        "YTMPARSE_DEFAULT_CREATOR_NAME",
        "YTMPARSE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.cookies_file is None
        assert settings.log_level == "WARNING"
        assert settings.parser_config == ParserConfig()
        assert settings.transport_config == TransportConfig()

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YTMPARSE_COOKIES_FILE", "/tmp/cookies.txt")
        monkeypatch.setenv("YTMPARSE_LANGUAGE", "de")
        monkeypatch.setenv("YTMPARSE_BATCH_POLICY", "isolate")
        monkeypatch.setenv("YTMPARSE_DEFAULT_CREATOR_NAME", "Platform")

        settings = Settings(_env_file=None)

        assert settings.cookies_file == Path("/tmp/cookies.txt")
        assert settings.transport_config == TransportConfig(language="de")
        assert settings.parser_config == ParserConfig(
            default_creator_name="Platform", batch_policy=BatchPolicy.ISOLATE
        )

    def test_log_level_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YTMPARSE_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("YTMPARSE_LOCATION=US\n")

        settings = Settings(_env_file=env_file)

        assert settings.location == "US"
