"""
Java code generator module.

Generates Java accessor interfaces from model class schemas.
"""

from .generator import JavaGenerator, create_java_generator, create_bean_generator
from .naming import JAVA_RESERVED_WORDS, is_valid_java_identifier

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "create_bean_generator",
    "JAVA_RESERVED_WORDS",
    "is_valid_java_identifier",
]
