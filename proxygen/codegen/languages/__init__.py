"""
Language-specific interface generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, create_java_generator, create_bean_generator
from .python import PythonGenerator, create_python_generator

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "create_bean_generator",
    "PythonGenerator",
    "create_python_generator",
]
