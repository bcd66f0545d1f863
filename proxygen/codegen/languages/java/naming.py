"""
Java-specific naming utilities.

Handles Java reserved words and identifier rules for generated method
and interface names.
"""

# Java keywords plus the reserved literals
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "true",
    "false",
    "null",
    "_",
}


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char in "_$"


def _is_identifier_part(char: str) -> bool:
    return char.isalnum() or char in "_$"


def is_valid_java_identifier(name: str) -> bool:
    """Check whether name can be used as a Java identifier."""
    if not name or name in JAVA_RESERVED_WORDS:
        return False
    if not _is_identifier_start(name[0]):
        return False
    return all(_is_identifier_part(char) for char in name[1:])


def validate_java_package_name(name: str) -> list[str]:
    """
    Validate a dotted Java package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        return errors

    for part in name.split("."):
        if not is_valid_java_identifier(part):
            errors.append(f"'{part}' is not a valid Java package segment")

    return errors
