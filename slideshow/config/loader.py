"""
Configuration loader for YAML files.

This module handles loading the optional config.yaml and applying
environment variable overrides on top of it.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SLIDESHOW_CONFIG"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    SLIDESHOW_CONFIG wins when set; otherwise config/config.yaml under the
    current working directory, alongside slides.json.

    Returns:
        Path to the configuration file (which may not exist)
    """
    if env_path := os.getenv(CONFIG_ENV_VAR):
        return Path(env_path)
    return Path.cwd() / "config" / "config.yaml"


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Load and parse a YAML file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML content as a dictionary (empty for an empty file)

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            return {}

        if not isinstance(content, dict):
            raise ConfigurationError(
                f"YAML file must contain a dictionary at root level: {file_path}"
            )

        return content

    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load the configuration file.

    A missing file is not an error: every setting has a default.

    Args:
        path: Explicit config path; defaults to get_config_path()

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file exists but cannot be loaded
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        if path is not None or os.getenv(CONFIG_ENV_VAR):
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return {}

    return load_yaml_file(config_path)


def merge_with_env(config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge configuration with environment variable overrides.

    Environment variables can override specific config values:
    - PORT -> server.port
    - HOST -> server.host
    - LOG_LEVEL -> logging.level
    - ENVIRONMENT -> environment

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment overrides applied

    Raises:
        ConfigurationError: If PORT is not an integer
    """
    merged = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in config.items()
    }

    if port := os.getenv("PORT"):
        try:
            merged.setdefault("server", {})["port"] = int(port)
        except ValueError as e:
            raise ConfigurationError(f"PORT must be an integer, got {port!r}") from e

    if host := os.getenv("HOST"):
        merged.setdefault("server", {})["host"] = host

    if log_level := os.getenv("LOG_LEVEL"):
        merged.setdefault("logging", {})["level"] = log_level.upper()

    if environment := os.getenv("ENVIRONMENT"):
        merged["environment"] = environment

    return merged
