"""
proxygen - accessor-interface generator for persisted model classes.

Reads model class schemas and emits proxy accessor interfaces declaring a
getter and setter for every persisted field.
"""

from .codegen import (
    ClassSchema,
    FieldDescriptor,
    GeneratorError,
    generate_interface,
    generate_interfaces,
    get_generator,
    load_schemas,
    quick_generate,
)

__version__ = "0.1.0"

__all__ = [
    "ClassSchema",
    "FieldDescriptor",
    "GeneratorError",
    "generate_interface",
    "generate_interfaces",
    "get_generator",
    "load_schemas",
    "quick_generate",
    "__version__",
]
