"""
Application settings management using Pydantic.

This module combines YAML configuration with environment variables to create
a unified settings object.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from slideshow.config.loader import ConfigurationError, load_config, merge_with_env


class ServerSettings(BaseModel):
    """HTTP listener settings."""

    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


class StorageSettings(BaseModel):
    """File system locations, relative to the working directory."""

    slides_file: Path = Path("slides.json")
    static_dir: Path = Path("static")
    images_dir: Path = Path("images")


class CacheSettings(BaseModel):
    """Cache header settings for static assets and images."""

    max_age_seconds: int = 86400

    @field_validator("max_age_seconds")
    @classmethod
    def validate_max_age(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_age_seconds must not be negative")
        return v


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Built from the YAML configuration with environment overrides already
    merged in by create_settings(). Only constructor arguments are read;
    merge_with_env() decides which environment variables apply.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    server: ServerSettings = Field(default_factory=ServerSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    environment: str = "development"


def create_settings() -> AppSettings:
    """
    Create application settings by combining YAML config and environment variables.

    Returns:
        AppSettings instance with all configuration loaded

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    config = merge_with_env(load_config())

    try:
        return AppSettings(
            server=ServerSettings(**config.get("server", {})),
            storage=StorageSettings(**config.get("storage", {})),
            cache=CacheSettings(**config.get("cache", {})),
            logging=LoggingSettings(**config.get("logging", {})),
            environment=config.get("environment", "development"),
        )
    except (ValidationError, TypeError) as e:
        raise ConfigurationError(f"Failed to create settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Get the application settings singleton.

    This function is cached, so subsequent calls return the same instance.
    Use reload_settings() to force a reload.

    Returns:
        Cached AppSettings instance
    """
    return create_settings()


def reload_settings() -> AppSettings:
    """Clear the settings cache and build a fresh AppSettings."""
    get_settings.cache_clear()
    return get_settings()
