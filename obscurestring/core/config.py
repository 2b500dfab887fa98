"""Runtime engine configuration from environment variables or a file.

This module centralizes the knobs of ``ObscureEngine`` that are not per-call
masking options: cache sizing, the async yield threshold and how non-text
input is treated.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..defaults import DEFAULT_ASYNC_CHUNK_SIZE, DEFAULT_CACHE_SIZE, INPUT_POLICIES

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Engine-level configuration.

    Attributes:
        cache_enabled: Whether the engine memoizes results at all
        cache_size: Capacity of the FIFO result cache
        async_chunk_size: Inputs at least this long yield once before masking
        input_policy: What to do with non-text input: "empty" returns "",
            "coerce" masks ``str(value)``, "reject" raises InvalidTypeError
    """

    cache_enabled: bool = True
    cache_size: int = DEFAULT_CACHE_SIZE
    async_chunk_size: int = DEFAULT_ASYNC_CHUNK_SIZE
    input_policy: str = "empty"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_cache_size()
        self._validate_chunk_size()
        self._validate_input_policy()

        logger.debug(
            f"EngineConfig initialized: cache_enabled={self.cache_enabled}, "
            f"cache_size={self.cache_size}, input_policy={self.input_policy}"
        )

    def _validate_cache_size(self) -> None:
        if not isinstance(self.cache_size, int) or self.cache_size <= 0:
            logger.warning(
                f"cache_size must be positive integer, got {self.cache_size}, "
                f"using {DEFAULT_CACHE_SIZE}"
            )
            self.cache_size = DEFAULT_CACHE_SIZE

    def _validate_chunk_size(self) -> None:
        if not isinstance(self.async_chunk_size, int) or self.async_chunk_size <= 0:
            logger.warning(
                f"async_chunk_size must be positive integer, got "
                f"{self.async_chunk_size}, using {DEFAULT_ASYNC_CHUNK_SIZE}"
            )
            self.async_chunk_size = DEFAULT_ASYNC_CHUNK_SIZE

    def _validate_input_policy(self) -> None:
        self.input_policy = str(self.input_policy).lower()
        if self.input_policy not in INPUT_POLICIES:
            logger.warning(
                f"Invalid input_policy '{self.input_policy}', using 'empty'. "
                f"Valid: {sorted(INPUT_POLICIES)}"
            )
            self.input_policy = "empty"

    @classmethod
    def from_environment(cls) -> "EngineConfig":
        """Load configuration from environment variables.

        Environment Variables:
            OBSCURESTRING_CACHE_ENABLED: Enable the result cache (true|false)
            OBSCURESTRING_CACHE_SIZE: Cache capacity (positive integer)
            OBSCURESTRING_ASYNC_CHUNK_SIZE: Async yield threshold (positive integer)
            OBSCURESTRING_INPUT_POLICY: Non-text input handling (empty|coerce|reject)

        Returns:
            EngineConfig instance with values from environment or defaults
        """
        return cls(
            cache_enabled=cls._get_env_bool("OBSCURESTRING_CACHE_ENABLED", True),
            cache_size=cls._get_env_int("OBSCURESTRING_CACHE_SIZE", DEFAULT_CACHE_SIZE),
            async_chunk_size=cls._get_env_int(
                "OBSCURESTRING_ASYNC_CHUNK_SIZE", DEFAULT_ASYNC_CHUNK_SIZE
            ),
            input_policy=os.getenv("OBSCURESTRING_INPUT_POLICY", "empty").strip(),
        )

    @classmethod
    def load_from_file(cls, config_path: Path) -> "EngineConfig":
        """Load engine configuration from a YAML or JSON file.

        An ``engine`` section is used if present, otherwise the whole
        document. Unknown keys are ignored.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file format is unsupported
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            if config_path.suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".json":
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported config format: {config_path.suffix}")

        if "engine" in data:
            data = data["engine"]

        known = {"cache_enabled", "cache_size", "async_chunk_size", "input_policy"}
        return cls(**{key: value for key, value in data.items() if key in known})

    @staticmethod
    def _get_env_bool(key: str, default: bool) -> bool:
        """Only 'true'/'false' (case insensitive) override the default."""
        value = os.getenv(key)
        if value is None:
            return default

        cleaned_value = value.strip().lower()
        if cleaned_value == "true":
            return True
        elif cleaned_value == "false":
            return False
        return default

    @staticmethod
    def _get_env_int(key: str, default: int) -> int:
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = int(value.strip())
        except ValueError:
            logger.warning(
                f"Environment variable {key}={value} is not a valid integer, "
                f"using default {default}"
            )
            return default
        if parsed <= 0:
            logger.warning(
                f"Environment variable {key}={value} must be positive, using default {default}"
            )
            return default
        return parsed

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "cache_enabled": self.cache_enabled,
            "cache_size": self.cache_size,
            "async_chunk_size": self.async_chunk_size,
            "input_policy": self.input_policy,
        }


_engine_config: Optional[EngineConfig] = None


def get_engine_config() -> EngineConfig:
    """Get the global engine configuration, creating it if needed."""
    global _engine_config
    if _engine_config is None:
        _engine_config = EngineConfig.from_environment()
    return _engine_config


def reset_engine_config() -> None:
    """Reset the global configuration for testing purposes."""
    global _engine_config
    _engine_config = None
