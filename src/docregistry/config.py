"""Configuration management."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from docregistry.exceptions import ConfigError

OUTPUT_FORMATS = ("text", "json")


class RegistryConfig(BaseSettings):
    """Configuration for the docreg CLI."""

    model_config = SettingsConfigDict(
        env_prefix="DOCREGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output settings
    default_format: str = "text"

    # Logging
    verbose: bool = False

    def resolve_format(self, requested: str | None = None) -> str:
        """Return the output format to use, validating it.

        Args:
            requested: Format passed on the command line, if any.

        Raises:
            ConfigError: If the resulting format is not supported.
        """
        fmt = (requested or self.default_format).strip().lower()
        if fmt not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unsupported output format '{fmt}'. Use one of: {', '.join(OUTPUT_FORMATS)}"
            )
        return fmt


@lru_cache
def _get_config_cached() -> RegistryConfig:
    return RegistryConfig()


def get_config(clear_cache: bool = False) -> RegistryConfig:
    """Get configuration instance.

    Args:
        clear_cache: If True, clear the cache before returning config.
    """
    if clear_cache:
        _get_config_cached.cache_clear()
    return _get_config_cached()
