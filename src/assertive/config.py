"""Library configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PLUGIN_GROUP = "assertive.plugins"


class AssertiveSettings(BaseSettings):
    """Runtime settings for assertive.

    Loads from environment variables automatically:
        ASSERTIVE_MAX_REPR_LENGTH, ASSERTIVE_AUTOLOAD_PLUGINS,
        ASSERTIVE_PLUGIN_ENTRY_POINT_GROUP
    """

    max_repr_length: int = Field(
        default=120, ge=8, description="Maximum length of a value rendered inside a failure message"
    )
    autoload_plugins: bool = Field(
        default=False, description="Load entry point plugins into the default registry on first expect()"
    )
    plugin_entry_point_group: str = Field(
        default=DEFAULT_PLUGIN_GROUP, description="Entry point group scanned for plugins"
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="ASSERTIVE_",
    )


@lru_cache(maxsize=1)
def get_settings() -> AssertiveSettings:
    """Get the cached settings instance."""
    return AssertiveSettings()
