# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env
#   file. Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - StorageConfig (dataclass)
#     data_file: str     (default "data/bunkit.json")
#     subjects_key: str  (default "subjects")
#
# - AppConfig (dataclass)
#     storage: StorageConfig
#     log_level: str     (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads
#     the environment (used by tests).
#
# USAGE:
# ------
#   from bunkit.config import get_config
#   config = get_config()
#   print(config.storage.data_file)
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_DATA_FILE = "data/bunkit.json"
DEFAULT_SUBJECTS_KEY = "subjects"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class StorageConfig:
    """Where the key-value store lives and which slot holds the subjects."""
    data_file: str = DEFAULT_DATA_FILE
    subjects_key: str = DEFAULT_SUBJECTS_KEY


@dataclass
class AppConfig:
    """Main application configuration."""
    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = DEFAULT_LOG_LEVEL

    def logging_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.strip().upper())
        if isinstance(level, int):
            return level
        return logging.WARNING


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    storage_config = StorageConfig(
        data_file=os.getenv("BUNKIT_DATA_FILE", DEFAULT_DATA_FILE),
        subjects_key=os.getenv("BUNKIT_SUBJECTS_KEY", DEFAULT_SUBJECTS_KEY),
    )

    _config_instance = AppConfig(
        storage=storage_config,
        log_level=os.getenv("BUNKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
