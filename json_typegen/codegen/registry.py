"""
Target language registry.

Maps language names and their aliases to generator classes and builds
configured generators for them.
"""

from dataclasses import dataclass, field
from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import ConfigError, GeneratorConfig, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for unknown targets or invalid registrations."""

    pass


@dataclass
class LanguageEntry:
    """A registered target language."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)


class GeneratorRegistry:
    """Registry of target languages keyed by name and alias."""

    def __init__(self):
        self._entries: Dict[str, LanguageEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator class for a language.

        Registering a language again replaces its generator and aliases.

        Args:
            language: Canonical language name
            generator_class: CodeGenerator subclass
            aliases: Alternative names accepted by :meth:`resolve_language`

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        key = language.lower()
        alias_keys = [alias.lower() for alias in aliases or [] if alias.lower() != key]

        for alias in alias_keys:
            owner = self._aliases.get(alias, key)
            if alias in self._entries or owner != key:
                raise RegistryError(f"Alias '{alias}' is already used by '{owner}'")

        self.unregister(key)
        self._entries[key] = LanguageEntry(key, generator_class, alias_keys)
        self._aliases.update({alias: key for alias in alias_keys})

        logger.debug("Registered %s -> %s", key, generator_class.__name__)

    def unregister(self, language: str):
        """Remove a language and its aliases (no-op if unknown)."""
        entry = self._entries.pop(language.lower(), None)
        if entry is None:
            return
        for alias in entry.aliases:
            self._aliases.pop(alias, None)

    def resolve_language(self, language: str) -> str:
        """
        Resolve a language name or alias to its canonical name.

        Raises:
            RegistryError: If the language is unknown
        """
        key = language.lower()
        key = self._aliases.get(key, key)

        if key not in self._entries:
            raise RegistryError(
                f"Unsupported language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return key

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._entries or key in self._aliases

    def list_languages(self) -> List[str]:
        """Canonical names in registration order."""
        return list(self._entries)

    def get_aliases_for_language(self, language: str) -> List[str]:
        return sorted(self._entries[self.resolve_language(language)].aliases)

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a configured generator.

        Args:
            language: Language name or alias
            config: A GeneratorConfig used as-is, a dict of overrides, or the
                path of a JSON config file; dicts and files are merged over the
                language defaults

        Returns:
            Generator instance

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        key = self.resolve_language(language)

        try:
            if config is None or isinstance(config, GeneratorConfig):
                final_config = config or load_config(key)
            elif isinstance(config, dict):
                final_config = load_config(key, custom_config=config)
            elif isinstance(config, (str, Path)):
                final_config = load_config(key, config_file=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config).__name__}")
        except (ConfigError, TypeError) as e:
            raise RegistryError(f"Invalid {key} configuration: {e}") from e

        return self._entries[key].generator_class(final_config)

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a language: name, generator class, extension, aliases, root name."""
        key = self.resolve_language(language)
        generator = self.create_generator(key)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(key),
            "root_name": generator.root_name,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global registry, registering the built-in languages on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_languages(_global_registry)
    return _global_registry


def _register_builtin_languages(registry: GeneratorRegistry):
    from .languages import (
        CSharpGenerator,
        GoGenerator,
        JavaGenerator,
        PythonGenerator,
        TypeScriptGenerator,
    )

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("java", JavaGenerator)
    registry.register("python", PythonGenerator, aliases=["py", "pydantic"])
    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])


# Public API functions using the global registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a configured generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about every supported language."""
    return {
        language: get_language_info(language) for language in list_supported_languages()
    }
