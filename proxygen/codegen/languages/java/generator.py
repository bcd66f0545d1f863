"""
Java accessor-interface generator.

Emits a public Java interface with one bodiless getter/setter pair per
persisted field.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...core.config import GeneratorConfig
from ...core.generator import InterfaceGenerator
from ...core.naming import NamingConvention
from ...core.schema import ClassSchema
from .naming import is_valid_java_identifier, validate_java_package_name


class JavaGenerator(InterfaceGenerator):
    """Code generator for Java proxy interfaces."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    @property
    def default_naming(self) -> str:
        return "proxy"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def is_valid_identifier(self, name: str) -> bool:
        return is_valid_java_identifier(name)

    def validate_package(self, package_name: str) -> List[str]:
        return validate_java_package_name(package_name)

    def validate_schema(
        self, schema: ClassSchema, naming: Optional[NamingConvention] = None
    ) -> List[str]:
        """Validate schema and package name for Java generation."""
        warnings = super().validate_schema(schema, naming)
        warnings.extend(self.validate_package(self.config.package_name))
        return warnings


def create_java_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    return JavaGenerator(config)


def create_bean_generator(package_name: str = "io.realm") -> JavaGenerator:
    """Create a Java generator using getX/setX accessors."""
    return JavaGenerator({"package_name": package_name, "naming": "bean"})
