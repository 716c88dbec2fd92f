from pydantic_settings import BaseSettings
from pydantic import AliasChoices, ConfigDict, Field
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Slack Thread Archiver"
    debug: bool = False

    # Slack (SLACK_TOKEN is the older variable name, still accepted)
    slack_bot_token: str = Field(
        default="",
        validation_alias=AliasChoices("slack_bot_token", "slack_token"),
    )

    # Output
    output_dir: str = "./slack_thread"

    # Media downloads (None = wait as long as the server takes)
    media_download_timeout: Optional[float] = None

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
