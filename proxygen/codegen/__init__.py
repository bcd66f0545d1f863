"""
Accessor-interface code generation.

Generates proxy accessor interfaces in various languages from model class
schemas.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    list_supported_languages,
)
from .core.generator import (
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
from .core.schema import (
    FieldDescriptor,
    ClassSchema,
    GeneratedInterface,
    MethodSignature,
    SchemaError,
    load_schemas,
)
from .core.naming import NamingConvention, find_name_collisions, get_naming_convention
from .core.sinks import OutputSink, MemorySink, FileSink, DirectorySink
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_from_description(description, language="java", config=None, sink=None):
    """
    Generate interfaces from a JSON schema description.

    Args:
        description: Parsed JSON description (see load_schemas)
        language: Target language name
        config: Generator configuration dict, GeneratorConfig or path
        sink: Output sink (defaults to an in-memory sink)

    Returns:
        BatchResult with one GenerationResult per class
    """
    schemas = load_schemas(description)
    generator = get_generator(language, config)
    return generate_interfaces(generator, schemas, sink=sink)


def quick_generate(schema, language="java", **options):
    """
    Quick generation of a single interface.

    Args:
        schema: ClassSchema or a class description dict
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    if not isinstance(schema, ClassSchema):
        schema = load_schemas(schema)[0]

    generator = get_generator(language, options)
    result = generate_interface(generator, schema)

    if result.success:
        return result.code
    else:
        raise result.exception


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "InterfaceGenerator",
    "GeneratorError",
    "SinkUnavailable",
    "InvalidFieldName",
    "InvalidInterfaceName",
    "InvalidPackageName",
    "NameCollisionError",
    "GenerationResult",
    "BatchResult",
    "FieldDescriptor",
    "ClassSchema",
    "GeneratedInterface",
    "MethodSignature",
    "SchemaError",
    "NamingConvention",
    "OutputSink",
    "MemorySink",
    "FileSink",
    "DirectorySink",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "find_name_collisions",
    "generate_interface",
    "generate_interfaces",
    "generate_from_description",
    "get_generator",
    "get_language_info",
    "get_naming_convention",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "load_schemas",
    "quick_generate",
]
