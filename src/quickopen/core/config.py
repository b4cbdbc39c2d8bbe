"""
Configuration module for quickopen.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.

This holds application settings only; the list of scanned locations is
persisted separately by LocationStore.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import typer
import yaml

logger = logging.getLogger(__name__)

APP_NAME = "quickopen"

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section) or {}
    return section_defaults.get(key, fallback)


def get_app_dir() -> Path:
    """Per-user configuration directory for quickopen."""
    return Path(typer.get_app_dir(APP_NAME))


@dataclass
class ScanConfig:
    """Configuration for directory scanning."""

    follow_symlinks: bool = field(
        default_factory=lambda: _get_default("scan", "follow_symlinks", False)
    )
    max_depth: int = field(default_factory=lambda: _get_default("scan", "max_depth", 0))
    case_sensitive: Optional[bool] = field(
        default_factory=lambda: _get_default("scan", "case_sensitive", None)
    )


@dataclass
class PickerConfig:
    """Configuration for the interactive picker."""

    title: str = field(default_factory=lambda: _get_default("picker", "title", "Open File"))
    max_rows: int = field(default_factory=lambda: _get_default("picker", "max_rows", 20))


@dataclass
class LocationsConfig:
    """Where the location list is stored."""

    file: str = field(default_factory=lambda: _get_default("locations", "file", ""))

    def resolve_file(self) -> Path:
        """Configured file, or ``<app dir>/locations.yaml`` when unset."""
        if self.file:
            return Path(os.path.expanduser(self.file))
        return get_app_dir() / "locations.yaml"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "WARNING"))
    format: str = field(
        default_factory=lambda: _get_default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


@dataclass
class QuickOpenConfig:
    """Main configuration class for quickopen."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    picker: PickerConfig = field(default_factory=PickerConfig)
    locations: LocationsConfig = field(default_factory=LocationsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "QuickOpenConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            QuickOpenConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported or its contents are invalid
            yaml.YAMLError: If a YAML file cannot be parsed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "QuickOpenConfig":
        """
        Create QuickOpenConfig from a dictionary.

        Raises:
            ValueError: If the data is not a mapping of known sections and keys
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        config = cls()
        sections = {
            "scan": ScanConfig,
            "picker": PickerConfig,
            "locations": LocationsConfig,
            "logging": LoggingConfig,
        }

        for name, section_cls in sections.items():
            if name not in data:
                continue
            values = data[name] or {}
            if not isinstance(values, dict):
                raise ValueError(f"Config section '{name}' must be a mapping")
            try:
                setattr(config, name, section_cls(**values))
            except TypeError as e:
                raise ValueError(f"Invalid keys in config section '{name}': {e}") from e

        return config

    def apply_env_overrides(self) -> "QuickOpenConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: QUICKOPEN_<SECTION>_<KEY>
        Examples:
            - QUICKOPEN_SCAN_MAX_DEPTH
            - QUICKOPEN_LOCATIONS_FILE
            - QUICKOPEN_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            # Scan config
            "QUICKOPEN_SCAN_FOLLOW_SYMLINKS": ("scan", "follow_symlinks", _parse_bool),
            "QUICKOPEN_SCAN_MAX_DEPTH": ("scan", "max_depth", int),
            "QUICKOPEN_SCAN_CASE_SENSITIVE": ("scan", "case_sensitive", _parse_optional_bool),
            # Picker config
            "QUICKOPEN_PICKER_TITLE": ("picker", "title", str),
            "QUICKOPEN_PICKER_MAX_ROWS": ("picker", "max_rows", int),
            # Locations config
            "QUICKOPEN_LOCATIONS_FILE": ("locations", "file", str),
            # Logging config
            "QUICKOPEN_LOGGING_LEVEL": ("logging", "level", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_optional_bool(value: str) -> Optional[bool]:
    """Parse a string to boolean; empty or "auto" means platform default."""
    if value.strip().lower() in ("", "auto", "none"):
        return None
    return _parse_bool(value)


def load_config(config_path: Optional[Path | str] = None, apply_env: bool = True) -> QuickOpenConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses
                     ``<app dir>/config.yaml`` when present, else defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        QuickOpenConfig instance
    """
    if config_path:
        config = QuickOpenConfig.from_file(config_path)
    else:
        user_config = get_app_dir() / "config.yaml"
        if user_config.exists():
            config = QuickOpenConfig.from_file(user_config)
        else:
            config = QuickOpenConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
