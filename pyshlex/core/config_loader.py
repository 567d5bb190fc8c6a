"""
pyshlex Configuration Loader

Configuration management for the lexer layers:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Environment lookup of extra word-break characters
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
import os
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, Mapping, get_args

from pyshlex.exceptions import ConfigValidationError


@dataclass
class LexerConfig:
    """Word-break settings."""
    custom_wordbreaks: str = ""
    env_var: str = "COMP_WORDBREAKS"
    read_env: bool = False

    def resolve_custom_wordbreaks(
        self,
        environ: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Return the extra word-break characters to use.

        The configured ``custom_wordbreaks`` always apply. When
        ``read_env`` is set, the value of ``env_var`` is appended.
        """
        if not self.read_env:
            return self.custom_wordbreaks
        env = os.environ if environ is None else environ
        return self.custom_wordbreaks + env.get(self.env_var, "")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for pyshlex.
    """
    lexer: LexerConfig = field(default_factory=LexerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'lexer': LexerConfig,
    'logging': LoggingConfig,
}


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('pyshlex.json')
        >>> print(config.lexer.env_var)
        COMP_WORDBREAKS
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be read, parsed or validated
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}"
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}"
            ) from e
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}"
            ) from e

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: Any) -> Config:
        """Parse configuration data into Config object."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = Config()

        for section_name, section_data in data.items():
            section_cls = _SECTIONS.get(section_name)
            if section_cls is None:
                raise ConfigValidationError(
                    f"Unknown configuration section: {section_name}",
                    key=section_name
                )
            if not isinstance(section_data, dict):
                raise ConfigValidationError(
                    f"Configuration section must be an object: {section_name}",
                    key=section_name
                )

            known = {f.name: f.type for f in fields(section_cls)}
            values = {}
            for key, value in section_data.items():
                if key not in known:
                    raise ConfigValidationError(
                        f"Invalid configuration key: {section_name}.{key}",
                        key=f"{section_name}.{key}"
                    )
                self._check_type(f"{section_name}.{key}", known[key], value)
                values[key] = value

            setattr(config, section_name, section_cls(**values))

        return config

    @staticmethod
    def _check_type(key: str, expected: Any, value: Any) -> None:
        # Optional[str] allows (str, NoneType)
        allowed = get_args(expected) or (expected,)
        # bool is a subclass of int, so compare exact types
        if type(value) not in allowed:
            names = " or ".join(t.__name__ for t in allowed)
            raise ConfigValidationError(
                f"Invalid type for {key}: expected {names}, "
                f"got {type(value).__name__}",
                key=key
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'lexer.env_var')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'lexer.custom_wordbreaks')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        field_types = {f.name: f.type for f in fields(obj)} if hasattr(obj, '__dataclass_fields__') else {}
        if final_key not in field_types:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        self._check_type(key, field_types[final_key], value)
        setattr(obj, final_key, value)
        self._loaded = True

    def reset(self) -> None:
        """Drop loaded settings and go back to the defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
