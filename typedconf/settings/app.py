"""Tool settings powered by Pydantic BaseSettings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typedconf.config.constants import DEFAULT_CONFIG_FILE


class AppSettings(BaseSettings):
    """Environment configuration for the typedconf command line."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEDCONF_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config: Path = Field(default=Path(DEFAULT_CONFIG_FILE))
    json_logs: bool = Field(default=False)
    log_level: str = Field(default="INFO")


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
