"""
Load and save settings.

Per-call options for reading and writing syndication resources. Defaults
come from the environment-driven ``feedmodel_config``.
"""

from pydantic import BaseModel, ConfigDict, Field

from .config import feedmodel_config


class SyndicationResourceLoadSettings(BaseModel):
    """Options applied while loading a resource."""

    model_config = ConfigDict(validate_assignment=True)

    retrieval_limit: int = Field(
        default_factory=lambda: feedmodel_config.retrieval_limit, ge=0
    )  # 0 means unlimited
    auto_detect_extensions: bool = Field(
        default_factory=lambda: feedmodel_config.auto_detect_extensions
    )
    supported_extensions: list[type] = Field(default_factory=list)
    character_encoding: str = Field(default_factory=lambda: feedmodel_config.character_encoding)


class SyndicationResourceSaveSettings(BaseModel):
    """Options applied while saving a resource."""

    model_config = ConfigDict(validate_assignment=True)

    character_encoding: str = Field(default_factory=lambda: feedmodel_config.character_encoding)
    minimize_output_size: bool = Field(
        default_factory=lambda: feedmodel_config.minimize_output_size
    )
    auto_detect_extensions: bool = Field(
        default_factory=lambda: feedmodel_config.auto_detect_extensions
    )
    supported_extensions: list[type] = Field(default_factory=list)
