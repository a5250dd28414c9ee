"""
Configuration Management

Provides the SDK configuration class and file/environment-based loading.
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .constants import (
    CONFIG_SECTION,
    DEFAULT_CONFIG_PATHS,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_SIZE,
    LogLevel
)
from .exceptions import ConfigurationError


VALID_LOG_LEVELS = tuple(level.value for level in LogLevel)


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


def _is_int(value: Any) -> bool:
    # bool is an int subclass; YAML "true" must not pass as 1
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SDKConfig:
    """SDK configuration settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    log_colors: bool = True
    log_json: bool = False
    log_max_size: int = DEFAULT_LOG_MAX_SIZE
    log_backup_count: int = DEFAULT_LOG_BACKUP_COUNT

    # Emit a DEBUG record for every facade dispatch
    trace_dispatch: bool = False

    def validate(self) -> None:
        """Validate configuration values."""
        errors: List[str] = []

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")

        if self.log_file is not None and (not isinstance(self.log_file, str) or not self.log_file.strip()):
            errors.append("log_file must be a non-empty string when set")

        if not _is_int(self.log_max_size) or self.log_max_size < 1024:
            errors.append("log_max_size must be at least 1024 bytes")

        if not _is_int(self.log_backup_count) or self.log_backup_count < 0:
            errors.append("log_backup_count must be a non-negative integer")

        if not isinstance(self.log_colors, bool):
            errors.append("log_colors must be a boolean")

        if not isinstance(self.log_json, bool):
            errors.append("log_json must be a boolean")

        if not isinstance(self.trace_dispatch, bool):
            errors.append("trace_dispatch must be a boolean")

        if errors:
            raise ConfigurationError(
                f"SDK configuration validation failed: {'; '.join(errors)}",
                details={"errors": errors}
            )

    @classmethod
    def from_env(cls) -> "SDKConfig":
        """Load configuration from environment variables."""
        try:
            config = cls(
                log_level=os.getenv("GAME_SDK_LOG_LEVEL", cls.log_level),
                log_file=os.getenv("GAME_SDK_LOG_FILE") or None,
                log_colors=_env_flag("GAME_SDK_LOG_COLORS", cls.log_colors),
                log_json=_env_flag("GAME_SDK_LOG_JSON", cls.log_json),
                log_max_size=int(
                    os.getenv("GAME_SDK_LOG_MAX_SIZE", str(cls.log_max_size))
                ),
                log_backup_count=int(
                    os.getenv("GAME_SDK_LOG_BACKUP_COUNT", str(cls.log_backup_count))
                ),
                trace_dispatch=_env_flag("GAME_SDK_TRACE_DISPATCH", cls.trace_dispatch),
            )
            config.validate()
            return config
        except ValueError as e:
            raise ConfigurationError(f"Failed to load SDK configuration from environment: {e}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SDKConfig":
        """Create configuration from dictionary."""
        try:
            # Filter only known fields
            field_names = {f.name for f in fields(cls)}
            filtered_data = {k: v for k, v in data.items() if k in field_names}
            config = cls(**filtered_data)
            config.validate()
            return config
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to create SDK configuration from dictionary: {e}")


class ConfigurationLoader:
    """Configuration loader with support for multiple sources."""

    DEFAULT_CONFIG_PATHS = DEFAULT_CONFIG_PATHS

    @staticmethod
    def find_default_config() -> Optional[str]:
        """Return the first default configuration file that exists."""
        for path in ConfigurationLoader.DEFAULT_CONFIG_PATHS:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def load_from_file(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_path: Path to configuration file. If None, looks for default locations.

        Returns:
            Dictionary containing configuration values.

        Raises:
            ConfigurationError: If file cannot be loaded or parsed.
        """
        if config_path is None:
            config_path = ConfigurationLoader.find_default_config()

        if config_path is None:
            return {}

        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        if config_path.suffix not in ('.json', '.yml', '.yaml'):
            raise ConfigurationError(f"Unsupported configuration file format: {config_path.suffix}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix == '.json':
                    data = json.load(f)
                else:
                    import yaml
                    data = yaml.safe_load(f) or {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}")
        except ImportError:
            raise ConfigurationError("PyYAML is required for YAML configuration files. Install with: pip install PyYAML")
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

        return data

    @staticmethod
    def load_sdk_config(
        config_path: Optional[Union[str, Path]] = None,
        use_env: bool = True
    ) -> SDKConfig:
        """
        Load SDK configuration from file and/or environment.

        Values come from the file's ``sdk`` section first; environment
        variables that differ from the defaults override them. An
        environment variable set to its default value is indistinguishable
        from an unset one, so it cannot switch off a file setting:
        ``GAME_SDK_TRACE_DISPATCH=false`` leaves ``trace_dispatch: true``
        from the file in place.

        Args:
            config_path: Path to configuration file.
            use_env: Whether to load from environment variables.

        Returns:
            SDKConfig instance.
        """
        config_data: Dict[str, Any] = {}

        if config_path or ConfigurationLoader.find_default_config():
            file_config = ConfigurationLoader.load_from_file(config_path)
            section = file_config.get(CONFIG_SECTION)
            if section is not None and not isinstance(section, dict):
                raise ConfigurationError(
                    f"'{CONFIG_SECTION}' section in {config_path or 'configuration file'} must be a mapping",
                    details={CONFIG_SECTION: section}
                )
            config_data.update(section or {})

        if config_data:
            config = SDKConfig.from_dict(config_data)
        else:
            config = SDKConfig()

        if use_env:
            env_config = SDKConfig.from_env()
            # Only override non-default values from environment
            default_config = SDKConfig()
            for field in fields(SDKConfig):
                env_value = getattr(env_config, field.name)
                default_value = getattr(default_config, field.name)
                if env_value != default_value:
                    setattr(config, field.name, env_value)

        config.validate()
        return config
