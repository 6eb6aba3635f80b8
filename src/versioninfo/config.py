"""Configuration values for the versioninfo package."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cfg_version: str | None = Field(
        None, description="Release version as major.minor.patch (e.g., '1.22.0')"
    )
    cfg_release_channel: str | None = Field(
        None, description="Release channel label (e.g., 'stable', 'nightly')"
    )

    # Prefixed so generic host variables like LOG_LEVEL aren't picked up
    git_executable: str = Field(
        "git",
        description="Git executable used for commit lookups",
        validation_alias="versioninfo_git_executable",
    )

    log_level: str = Field(
        "INFO",
        description="Log level used by configure_logging()",
        validation_alias="versioninfo_log_level",
    )


settings = Settings()
