"""Configuration management for the Ad Copy Assistant.

Configuration is stored as YAML in ~/.adcopy/config.yaml and validated
with pydantic. A few values can be overridden from the environment:

    ADCOPY_CONFIG_DIR   directory holding config.yaml
    ADCOPY_DB_PATH      SQLite database path
    ADCOPY_LOG_LEVEL    logging level name
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_CONFIG_DIR = "ADCOPY_CONFIG_DIR"
ENV_DB_PATH = "ADCOPY_DB_PATH"
ENV_LOG_LEVEL = "ADCOPY_LOG_LEVEL"


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = Field(default="~/.adcopy/adcopy.db")


class ApiConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    user_header: str = "X-User-Id"  # Header carrying the authenticated user id


class AppConfig(BaseModel):
    """Application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def db_path(self) -> Path:
        return Path(self.database.path).expanduser()


class ConfigManager:
    """Manages configuration storage.

    A missing configuration file is not an error: defaults are used and
    environment overrides still apply.

    Attributes:
        config_dir: Path to the configuration directory.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".adcopy"
    CONFIG_FILE = "config.yaml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory path.
        """
        env_dir = os.environ.get(ENV_CONFIG_DIR)
        self.config_dir = Path(config_dir or env_dir or self.DEFAULT_CONFIG_DIR).expanduser()
        self._config: Optional[AppConfig] = None

    @property
    def config_path(self) -> Path:
        """Path to the configuration file."""
        return self.config_dir / self.CONFIG_FILE

    def _apply_env(self, data: dict) -> dict:
        """Overlay environment overrides on raw configuration data."""
        db_path = os.environ.get(ENV_DB_PATH)
        if db_path:
            data.setdefault("database", {})["path"] = db_path
        log_level = os.environ.get(ENV_LOG_LEVEL)
        if log_level:
            data["log_level"] = log_level
        return data

    def load(self) -> AppConfig:
        """Load configuration from disk and the environment.

        Returns:
            The loaded AppConfig.

        Raises:
            ConfigError: If the file can't be parsed or fails validation.
        """
        data: dict = {}
        if self.config_path.exists():
            try:
                data = yaml.safe_load(self.config_path.read_text()) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid configuration format: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Configuration at {self.config_path} must be a mapping")
        else:
            logger.debug(f"No configuration at {self.config_path}, using defaults")

        try:
            self._config = AppConfig(**self._apply_env(data))
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        return self._config

    def save(self, config: AppConfig) -> None:
        """Save configuration to disk.

        Raises:
            ConfigError: If save operation fails.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(yaml.safe_dump(config.model_dump(), sort_keys=False))
            self._config = config
            logger.info(f"Configuration saved to {self.config_path}")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e

    def get_config(self) -> AppConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def update(self, **kwargs: Any) -> AppConfig:
        """Update specific top-level configuration values and save.

        Unknown keys are ignored.
        """
        config_dict = self.get_config().model_dump()

        for key, value in kwargs.items():
            if key in config_dict:
                config_dict[key] = value

        try:
            new_config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        self.save(new_config)
        return new_config

    def is_configured(self) -> bool:
        """Check if a configuration file exists."""
        return self.config_path.exists()

    def reset(self) -> None:
        """Delete the configuration file and forget the cached config."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = None
        logger.info("Configuration reset complete")
