"""Application configuration file loading and management"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_FRONTEND_MODULE = "twinslide.frontend.headless"


@dataclass
class LoggingConfig:
    """Logging configuration settings"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class FrontendConfig:
    """Frontend selection settings"""
    module: str = DEFAULT_FRONTEND_MODULE


@dataclass
class AppConfig:
    """Complete application configuration"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    frontend: FrontendConfig = field(default_factory=FrontendConfig)
    bindings: Dict[str, str] = field(default_factory=dict)  # key name -> action name


class ConfigLoader:
    """Loads and merges configuration from layered YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "/etc/twinslide/config.yml",
        "~/.config/twinslide/config.yml",
    ]

    @staticmethod
    def configFiles_find() -> List[Path]:
        """
        Find configuration files in standard locations

        Returns:
            Existing config files, system-wide first
        """
        found: List[Path] = []
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                found.append(path)
        return found

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the top level is not a dictionary
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def dicts_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge overlay into base, recursing into nested dictionaries

        Args:
            base: Lower-precedence values
            overlay: Higher-precedence values

        Returns:
            New merged dictionary
        """
        merged = dict(base)
        for key, value in overlay.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = ConfigLoader.dicts_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> AppConfig:
        """
        Parse configuration dictionary into AppConfig object

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed AppConfig with defaults for omitted keys

        Raises:
            ValueError: If a section has the wrong shape or a bad log level
        """
        logging_data = ConfigLoader._section_get(data, "logging")
        level = str(logging_data.get("level", "INFO")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{level}' in logging.level")
        logging_config = LoggingConfig(
            level=level,
            file=logging_data.get("file"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
        )

        frontend_data = ConfigLoader._section_get(data, "frontend")
        frontend = FrontendConfig(
            module=frontend_data.get("module", DEFAULT_FRONTEND_MODULE),
        )

        bindings_data = ConfigLoader._section_get(data, "bindings")
        bindings: Dict[str, str] = {}
        for key, action in bindings_data.items():
            if not isinstance(action, str):
                raise ValueError(f"Binding for key '{key}' must name an action")
            bindings[str(key)] = action

        return AppConfig(
            logging=logging_config,
            frontend=frontend,
            bindings=bindings,
        )

    @staticmethod
    def _section_get(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Get a top-level section, treating absent or null as empty"""
        section = data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a dictionary")
        return section

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> AppConfig:
        """
        Load configuration from standard locations and an optional explicit file

        Standard files are merged system-wide first, so per-user values win;
        an explicit file is merged last.

        Args:
            file_path: Optional path to an extra config file

        Returns:
            Parsed AppConfig object

        Raises:
            FileNotFoundError: If the explicit config file does not exist
            ValueError: If a config file is invalid
        """
        paths = ConfigLoader.configFiles_find()
        if file_path is not None:
            if not file_path.is_file():
                raise FileNotFoundError(f"Config file not found: {file_path}")
            paths.append(file_path)

        data: Dict[str, Any] = {}
        for path in paths:
            data = ConfigLoader.dicts_merge(data, ConfigLoader.yaml_load(path))
        return ConfigLoader.config_parse(data)
