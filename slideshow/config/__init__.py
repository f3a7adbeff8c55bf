"""Configuration management."""

from slideshow.config.loader import ConfigurationError
from slideshow.config.settings import AppSettings, get_settings, reload_settings

__all__ = ["AppSettings", "ConfigurationError", "get_settings", "reload_settings"]
