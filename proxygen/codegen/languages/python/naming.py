"""
Python-specific naming utilities.

Handles Python reserved words and identifier rules for generated protocol
methods and type annotations.
"""

# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}


def is_valid_python_identifier(name: str) -> bool:
    """Check whether name can be used as a Python identifier."""
    return name.isidentifier() and name not in PYTHON_RESERVED_WORDS


def format_annotation(type_name: str) -> str:
    """
    Render a type name as a Python annotation.

    Dotted identifiers are emitted as-is; anything else (``int[]``,
    ``ModelRef<Person>``) becomes a string annotation so the module still
    parses.
    """
    parts = type_name.split(".")
    if all(is_valid_python_identifier(part) for part in parts):
        return type_name
    return repr(type_name)
