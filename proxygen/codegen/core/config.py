"""
Generator configuration.

Settings are merged in three layers: per-language defaults, an optional
JSON config file, then explicit overrides (CLI flags or keyword options).
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import NAMING_CONVENTIONS

LINE_ENDINGS = ("\n", "\r\n")

LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "java": {"package_name": "io.realm", "naming": "proxy"},
    "python": {"package_name": "realm_proxies", "naming": "snake"},
}


class ConfigError(Exception):
    """Configuration file missing, unreadable or malformed."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all interface generators."""

    output_dir: Optional[str] = None
    # Package (Java) or module path (Python) of generated interfaces
    package_name: str = "io.realm"

    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # None selects the generator's default convention
    naming: Optional[str] = None
    add_comments: bool = True

    # Unrecognized keys from files or overrides
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size


class ConfigManager:
    """Builds GeneratorConfig values from defaults, files and overrides."""

    def __init__(self):
        self._defaults: Dict[str, Dict[str, Any]] = {
            language: dict(values) for language, values in LANGUAGE_DEFAULTS.items()
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge the configuration layers for a language.

        Args:
            language: Target language (None for the bare dataclass defaults)
            custom_config: Overrides; keys whose value is None are skipped
            config_file: JSON config file applied before the overrides

        Raises:
            ConfigError: If the config file cannot be used
        """
        merged = dict(self._defaults.get((language or "").lower(), {}))

        if config_file:
            merged.update(self._load_config_file(config_file))

        if custom_config:
            merged.update({k: v for k, v in custom_config.items() if v is not None})

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return data

    def _dict_to_config(self, values: Dict[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(GeneratorConfig)}
        kwargs = {k: v for k, v in values.items() if k in known}
        extra = {k: v for k, v in values.items() if k not in known}

        if extra:
            kwargs["custom"] = {**kwargs.get("custom", {}), **extra}

        return GeneratorConfig(**kwargs)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a config as a flat JSON object that get_config can read back."""
        path = Path(output_path)
        data = asdict(config)
        data.update(data.pop("custom"))

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        return sorted(self._defaults)

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """
        Check a config for values generation would trip over.

        Returns:
            Warning messages (empty if the config is usable)
        """
        warnings = []

        if config.naming is not None and config.naming not in NAMING_CONVENTIONS:
            warnings.append(f"Invalid naming convention: {config.naming}")

        if config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in LINE_ENDINGS:
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        if config.package_name and not all(
            part.isidentifier() for part in config.package_name.split(".")
        ):
            warnings.append(f"Invalid package name: {config.package_name}")

        if language == "python" and config.naming == "proxy":
            warnings.append(
                "The 'proxy' naming convention derives names with '$', "
                "which is not valid in Python identifiers"
            )

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Shared ConfigManager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Merge defaults, file and overrides using the shared ConfigManager."""
    return get_config_manager().get_config(language, custom_config, config_file)
