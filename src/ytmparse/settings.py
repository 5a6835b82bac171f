"""CLI settings using pydantic-settings."""

from functools import cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ytmparse.config import ParserConfig, TransportConfig
from ytmparse.models.enums import BatchPolicy

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YTMPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Authentication (library surfaces need a signed-in session)
    cookies_file: Path | None = Field(
        default=None, description="Netscape cookies.txt exported from YouTube Music"
    )

    # Session settings
    language: str = Field(default="en", description="Response language")
    location: str = Field(default="", description="Region code, e.g. 'US'")

    # Assembly settings
    batch_policy: BatchPolicy = Field(
        default=BatchPolicy.FAIL_FAST,
        description="How list surfaces treat a malformed item",
    )
    default_creator_name: str = Field(
        default=ParserConfig.default_creator_name,
        description="Creator credited to platform playlists",
    )

    log_level: LogLevel = Field(default="WARNING", description="Log level")

    @property
    def parser_config(self) -> ParserConfig:
        return ParserConfig(
            default_creator_name=self.default_creator_name,
            batch_policy=self.batch_policy,
        )

    @property
    def transport_config(self) -> TransportConfig:
        return TransportConfig(language=self.language, location=self.location)


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
