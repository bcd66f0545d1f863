"""
Python code generator module.

Generates ``typing.Protocol`` accessor stubs from model class schemas.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import PYTHON_RESERVED_WORDS, format_annotation, is_valid_python_identifier

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    # Naming
    "PYTHON_RESERVED_WORDS",
    "format_annotation",
    "is_valid_python_identifier",
]
