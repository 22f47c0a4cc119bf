import os
import json
import logging
from dataclasses import asdict, fields
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from plasma_frames.config.render_config import RenderConfig
from plasma_frames.errors import ConfigError

ENV_PREFIX = "PLASMA_"

# Fields that must hold a positive integer
POSITIVE_FIELDS = ("width", "height", "frames", "workers")

# Fields that must hold a string
STRING_FIELDS = ("output_dir", "prefix", "log_level")


class Config:
    """Configuration management with environment variable support"""

    @classmethod
    def load(
        cls,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> RenderConfig:
        """Load configuration from defaults, file, environment and overrides"""
        config = asdict(RenderConfig())

        # Load from file if exists
        if config_file and os.path.exists(config_file):
            try:
                with open(config_file, "r") as f:
                    file_config = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigError(
                    f"Error loading config file {config_file}: {e}"
                ) from e
            if not isinstance(file_config, dict):
                raise ConfigError(f"Config file {config_file} must hold a JSON object")
            unknown = set(file_config) - set(config)
            if unknown:
                raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
            config.update(file_config)

        # Override with environment variables, .env included
        load_dotenv()
        for key in config:
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if env_key in os.environ:
                config[key] = cls._convert(key, os.environ[env_key], config[key])

        # Command-line args override everything else
        for key, value in (overrides or {}).items():
            if key not in config:
                raise ConfigError(f"Unknown config key: {key}")
            if value is not None:
                config[key] = value

        return cls.validate(RenderConfig(**config))

    @staticmethod
    def _convert(key, value, current):
        # Type conversion
        if isinstance(current, bool):
            return value.lower() in ("true", "yes", "1")
        if isinstance(current, int):
            try:
                return int(value)
            except ValueError:
                raise ConfigError(
                    f"{ENV_PREFIX}{key.upper()} must be an integer, got {value!r}"
                ) from None
        return value

    @staticmethod
    def validate(config: RenderConfig) -> RenderConfig:
        """Reject sizes and counts that cannot describe a frame sequence"""
        for f in fields(config):
            if f.name not in POSITIVE_FIELDS:
                continue
            value = getattr(config, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{f.name} must be a positive integer, got {value!r}")
        for name in STRING_FIELDS:
            value = getattr(config, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if not config.prefix:
            raise ConfigError("prefix must not be empty")
        return config

    @staticmethod
    def setup_logging(log_level: str) -> logging.Logger:
        """Configure logging based on config"""
        numeric_level = getattr(logging, str(log_level).upper(), None)
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO

        logging.basicConfig(
            level=numeric_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        return logging.getLogger("plasma-frames")
