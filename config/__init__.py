"""Ad Copy Assistant - Configuration Module.

This module provides YAML-backed configuration with environment
overrides, validated by pydantic.
"""

from .config_manager import AppConfig, ConfigError, ConfigManager

__all__ = ["AppConfig", "ConfigManager", "ConfigError"]
