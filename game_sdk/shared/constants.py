"""
SDK Constants

Defines constants used throughout the game SDK.
"""

from enum import Enum


# Chat channels
GLOBAL_CHANNEL = "global"
MATCH_CHANNEL = "match"
DEFAULT_CHANNEL = GLOBAL_CHANNEL

# Action tags
MOVE_ACTION = "move"
SHOOT_ACTION = "shoot"

# Default configuration file locations
DEFAULT_CONFIG_PATHS = [
    "game_sdk.json",
    ".game_sdk.json",
    "game_sdk.yaml",
    ".game_sdk.yaml",
    "game_sdk.yml",
    ".game_sdk.yml"
]
CONFIG_SECTION = "sdk"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_MAX_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(Enum):
    """Enumeration of logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
