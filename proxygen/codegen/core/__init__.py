"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    InterfaceGenerator,
    GeneratorError,
    SinkUnavailable,
    InvalidFieldName,
    InvalidInterfaceName,
    InvalidPackageName,
    NameCollisionError,
    GenerationResult,
    BatchResult,
    generate_interface,
    generate_interfaces,
)
from .schema import (
    FieldDescriptor,
    ClassSchema,
    MethodSignature,
    GeneratedInterface,
    SchemaError,
    load_schemas,
    schema_from_dict,
    schema_to_dict,
)
from .naming import (
    NamingConvention,
    ProxyNamingConvention,
    BeanNamingConvention,
    SnakeNamingConvention,
    NameCollision,
    find_name_collisions,
    get_naming_convention,
)
from .sinks import OutputSink, MemorySink, FileSink, DirectorySink
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "InterfaceGenerator",
    "GeneratorError",
    "SinkUnavailable",
    "InvalidFieldName",
    "InvalidInterfaceName",
    "InvalidPackageName",
    "NameCollisionError",
    "GenerationResult",
    "BatchResult",
    "generate_interface",
    "generate_interfaces",
    # Schema system - core data structures
    "FieldDescriptor",
    "ClassSchema",
    "MethodSignature",
    "GeneratedInterface",
    "SchemaError",
    "load_schemas",
    "schema_from_dict",
    "schema_to_dict",
    # Naming conventions
    "NamingConvention",
    "ProxyNamingConvention",
    "BeanNamingConvention",
    "SnakeNamingConvention",
    "NameCollision",
    "find_name_collisions",
    "get_naming_convention",
    # Output sinks
    "OutputSink",
    "MemorySink",
    "FileSink",
    "DirectorySink",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
