"""
Configuration management for code generation.

Each target language has a set of defaults. A JSON configuration file
and programmatic overrides are merged over them, in that order. Keys
that are not :class:`GeneratorConfig` fields are language-specific
settings and end up in ``language_config``.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields

from .schema import DEFAULT_MAX_DEPTH
from ...logging_config import get_logger

logger = get_logger(__name__)

LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "typescript": {},
    "go": {
        "root_name": "AutoGenerated",
        "package_name": "main",
        "use_tabs": True,
        "language_config": {
            "int_type": "int",
            "float_type": "float64",
            "unknown_type": "interface{}",
        },
    },
    "java": {},
    "python": {
        "language_config": {"base_class": "BaseModel", "pydantic_module": "pydantic"},
    },
    "csharp": {
        "package_name": "JsonToCSharp",
    },
}

GO_INT_TYPES = {"int", "int8", "int16", "int32", "int64"}
GO_FLOAT_TYPES = {"float32", "float64"}
GO_UNKNOWN_TYPES = {"interface{}", "any"}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all generators."""

    # Naming
    root_name: Optional[str] = None  # None uses the generator's default
    package_name: Optional[str] = None  # package / namespace, where supported

    # Code style
    indent_size: int = 4
    use_tabs: bool = False
    add_comments: bool = False  # "generated" header at the top of the output

    # Inference limits
    max_depth: int = DEFAULT_MAX_DEPTH

    # Language-specific settings
    language_config: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


_CONFIG_FIELDS = {config_field.name for config_field in fields(GeneratorConfig)}


class ConfigManager:
    """Builds GeneratorConfig instances from defaults, files and overrides."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = copy.deepcopy(LANGUAGE_DEFAULTS if defaults is None else defaults)

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get the merged configuration for a language.

        Args:
            language: Canonical target language name
            custom_config: Overrides applied last
            config_file: JSON configuration file applied over the defaults

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        merged = _normalize(self._defaults.get(language, {}))

        if config_file:
            _merge_config(merged, _normalize(self._load_config_file(config_file)))
            logger.debug("Loaded configuration file %s", config_file)

        if custom_config:
            _merge_config(merged, _normalize(custom_config))

        return GeneratorConfig(**merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            config = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def list_languages(self) -> List[str]:
        """Languages that have defaults."""
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """
        Check a configuration for values the generators cannot use.

        Returns:
            Warning messages (empty if the configuration is fine)
        """
        warnings = []

        if config.root_name is not None and not config.root_name.isidentifier():
            warnings.append(f"Invalid root name: {config.root_name}")

        if config.package_name and not all(
            part.isidentifier() for part in config.package_name.split(".")
        ):
            warnings.append(f"Invalid package name: {config.package_name}")

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.max_depth < 1:
            warnings.append(f"Invalid max_depth: {config.max_depth}")

        if language == "go":
            options = config.language_config
            for key, allowed in (
                ("int_type", GO_INT_TYPES),
                ("float_type", GO_FLOAT_TYPES),
                ("unknown_type", GO_UNKNOWN_TYPES),
            ):
                if key in options and options[key] not in allowed:
                    warnings.append(f"Invalid Go {key}: {options[key]}")

        return warnings


def _normalize(config: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a config dict, moving unknown keys into ``language_config``."""
    normalized: Dict[str, Any] = {"language_config": {}}

    for key, value in config.items():
        if key == "language_config":
            normalized["language_config"].update(value or {})
        elif key in _CONFIG_FIELDS:
            normalized[key] = value
        else:
            normalized["language_config"][key] = value

    return normalized


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Merge normalized overrides into base; language settings merge key by key."""
    for key, value in overrides.items():
        if key == "language_config":
            base["language_config"].update(value)
        else:
            base[key] = value


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Load the merged configuration for a language from the global manager.

    Args:
        language: Canonical target language name
        custom_config: Overrides applied last
        config_file: JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(language, custom_config, config_file)
