"""
Target-language registry.

Maps language names and aliases (``py`` for ``python``) to interface
generator classes and builds configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import InterfaceGenerator

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Unknown target language or invalid registration."""

    pass


class GeneratorRegistry:
    """Known target languages and their generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[InterfaceGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[InterfaceGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register an interface generator for a target language.

        An existing registration is left alone unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not an InterfaceGenerator or an
                alias is already taken
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, InterfaceGenerator)
        ):
            raise RegistryError(
                f"{generator_class!r} is not an InterfaceGenerator subclass"
            )

        key = language.lower()
        if key in self._generators and not replace:
            return
        self._generators[key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key:
                continue
            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                target = self._aliases.get(alias_key)
                if target is not None and target != key:
                    raise RegistryError(f"Alias '{alias}' already points to '{target}'")
            self._aliases[alias_key] = key

    def unregister(self, language: str):
        """Forget a language together with its aliases."""
        key = language.lower()
        self._generators.pop(key, None)
        for alias in [a for a, target in self._aliases.items() if target == key]:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Return the primary name for a language name or alias.

        Raises:
            RegistryError: If the language is unknown
        """
        key = language.lower()
        if key in self._generators:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[InterfaceGenerator]:
        return self._generators[self.resolve(language)]

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> InterfaceGenerator:
        """
        Build a generator for a language.

        Args:
            language: Language name or alias
            config: A GeneratorConfig is used as-is; a dict is merged over
                the language defaults; a str/Path names a JSON config file

        Raises:
            RegistryError: If the language or the config type is unknown
        """
        key = self.resolve(language)

        if isinstance(config, GeneratorConfig):
            resolved = config
        elif isinstance(config, (str, Path)):
            resolved = load_config(key, config_file=config)
        elif isinstance(config, dict) or config is None:
            resolved = load_config(key, custom_config=config)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return self._generators[key](resolved)

    def list_languages(self) -> List[str]:
        """Primary language names, sorted."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        key = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == key)

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._generators or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a language using a default-configured generator.

        Returns:
            Dict with name, class, file_extension, default_naming,
            package_name, aliases and module
        """
        key = self.resolve(language)
        generator = self.create_generator(key)
        generator_class = type(generator)

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "default_naming": generator.default_naming,
            "package_name": generator.config.package_name,
            "aliases": self.get_aliases_for_language(key),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Shared registry with the bundled languages registered."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_bundled(_global_registry)
    return _global_registry


def _register_bundled(registry: GeneratorRegistry):
    from .languages.java import JavaGenerator
    from .languages.python import PythonGenerator

    registry.register("java", JavaGenerator)
    registry.register("python", PythonGenerator, aliases=["py"])


# Shortcuts over the shared registry


def get_generator(language: str, config: ConfigSource = None) -> InterfaceGenerator:
    """Build a configured generator for a language name or alias."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)
