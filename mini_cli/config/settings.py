"""
Configuration settings for the application.
"""

import codecs
import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

from mini_cli.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("MINI_LOG_LEVEL", "WARNING")
        self.encoding: str = self._get_encoding("MINI_ENCODING", "utf-8")
        self.prompt: str = self._get_env("MINI_PROMPT", "mini> ")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> int:
        """Resolve a logging level name, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level in {key}: {name}")
        return level

    def _get_encoding(self, key: str, default: str) -> str:
        """Get a text encoding name, raise error if Python does not know it."""
        value = self._get_env(key, default).strip()
        try:
            codecs.lookup(value)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding in {key}: {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
