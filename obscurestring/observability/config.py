"""Configuration for logging."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format (json or text)")
    output: str = Field(default="stderr", description="Log output (stderr or file)")
    file_path: str | None = Field(default=None, description="Log file path")

    @classmethod
    def from_file(cls, config_path: Path | str) -> LoggingConfig:
        """Load configuration from the ``logging`` section of a YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data.get("logging", {}))

    @classmethod
    def from_env(cls) -> LoggingConfig:
        """Load configuration from environment variables."""
        config = cls()
        config.level = os.getenv("OBSCURESTRING_LOG_LEVEL", config.level)
        config.format = os.getenv("OBSCURESTRING_LOG_FORMAT", config.format)
        config.file_path = os.getenv("OBSCURESTRING_LOG_FILE", config.file_path)
        if config.file_path:
            config.output = "file"
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


_config: LoggingConfig | None = None


def get_config() -> LoggingConfig:
    """Get the global logging configuration."""
    global _config
    if _config is None:
        _config = LoggingConfig.from_env()
    return _config


def set_config(config: LoggingConfig) -> None:
    """Set the global logging configuration."""
    global _config
    _config = config
