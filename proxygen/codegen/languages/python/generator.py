"""
Python accessor-protocol generator.

Emits a ``typing.Protocol`` class with one getter/setter stub pair per
persisted field.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...core.config import GeneratorConfig
from ...core.generator import InterfaceGenerator
from ...core.schema import GeneratedInterface
from .naming import format_annotation, is_valid_python_identifier


class PythonGenerator(InterfaceGenerator):
    """Code generator for Python accessor protocols."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def default_naming(self) -> str:
        return "snake"

    @property
    def void_type(self) -> str:
        return "None"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def is_valid_identifier(self, name: str) -> bool:
        return is_valid_python_identifier(name)

    def get_template_context(self, interface: GeneratedInterface) -> Dict[str, Any]:
        context = super().get_template_context(interface)
        for accessor in context["accessors"]:
            accessor["annotation"] = format_annotation(accessor["parameter_type"])
        return context


def create_python_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    return PythonGenerator(config)
