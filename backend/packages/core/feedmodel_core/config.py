"""
Library configuration.

Defaults for loading and saving syndication resources, read from
environment variables prefixed with FEEDMODEL_.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class FeedmodelConfig(BaseSettings):
    """
    Feedmodel configuration from environment variables.

    All settings are prefixed with FEEDMODEL_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDMODEL_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Loading
    retrieval_limit: int = Field(default=0, ge=0)  # 0 means unlimited
    auto_detect_extensions: bool = True

    # Saving
    character_encoding: str = "utf-8"
    minimize_output_size: bool = False

    # Diagnostics
    log_level: str = "INFO"


# Global instance
feedmodel_config = FeedmodelConfig()
