"""
Directory Module Configuration.

Manages environment variables specific to the leadership directory.
Uses prefix DIRECTORY_ to avoid conflicts with framework settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseSettings):
    """
    Directory-specific settings loaded from environment variables.

    All variables use the DIRECTORY_ prefix for module isolation.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(
        default="Chinese Leadership Explorer",
        validation_alias="DIRECTORY_APP_NAME",
    )

    # Base URL the explorer page uses to fetch /api/bodies and /api/officials;
    # unset means the origin the page itself was requested on
    api_base_url: str | None = Field(
        default=None,
        description="Base URL of the directory JSON API",
        validation_alias="DIRECTORY_API_BASE_URL",
    )

    leader_image_placeholder: str = Field(
        default="/placeholder.svg?height=200&width=150",
        description="Image URL attached to every leader in /api/leaders",
        validation_alias="DIRECTORY_LEADER_IMAGE_PLACEHOLDER",
    )


@lru_cache
def get_directory_settings() -> DirectorySettings:
    """
    Get cached directory settings.

    Uses LRU cache to ensure settings are loaded only once.
    """
    return DirectorySettings()
