"""
Core schema representation for interface generation.

Describes one persisted model class (its name and declared fields) and the
accessor interface generated from it. Field metadata arrives already
resolved; these types only carry it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


class SchemaError(ValueError):
    """Raised when a schema description is malformed."""

    pass


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents one declared field of a model class."""

    name: str
    type_name: str
    is_static: bool = False
    is_ignored: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError("Field name must be a non-empty string")
        if not isinstance(self.type_name, str) or not self.type_name.strip():
            raise SchemaError(f"Field '{self.name}' has no type name")

    @property
    def eligible(self) -> bool:
        """True when the field needs generated accessors."""
        return not self.is_static and not self.is_ignored


@dataclass(frozen=True)
class ClassSchema:
    """Represents one model class and its fields in declaration order."""

    simple_class_name: str
    fields: Tuple[FieldDescriptor, ...] = ()

    def __post_init__(self):
        if not isinstance(self.simple_class_name, str) or not self.simple_class_name:
            raise SchemaError("Class name must be a non-empty string")

        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))

        seen = set()
        for descriptor in self.fields:
            if not isinstance(descriptor, FieldDescriptor):
                raise SchemaError(
                    f"Fields of {self.simple_class_name} must be FieldDescriptor "
                    f"instances, got {type(descriptor).__name__}"
                )
            if descriptor.name in seen:
                raise SchemaError(
                    f"Duplicate field '{descriptor.name}' in {self.simple_class_name}"
                )
            seen.add(descriptor.name)

    def eligible_fields(self) -> List[FieldDescriptor]:
        """Fields that are neither static nor ignored, in declaration order."""
        return [f for f in self.fields if f.eligible]

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Get field by name."""
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None


@dataclass(frozen=True)
class MethodSignature:
    """A bodiless method declaration in a generated interface."""

    name: str
    return_type: str
    parameters: Tuple[Tuple[str, str], ...] = ()
    field_name: Optional[str] = None

    @property
    def is_setter(self) -> bool:
        return bool(self.parameters)


@dataclass(frozen=True)
class GeneratedInterface:
    """The accessor interface produced for one ClassSchema."""

    package_name: str
    simple_name: str
    source_class: str
    methods: Tuple[MethodSignature, ...] = field(default_factory=tuple)

    @property
    def qualified_name(self) -> str:
        if not self.package_name:
            return self.simple_name
        return f"{self.package_name}.{self.simple_name}"

    @property
    def accessor_pairs(self) -> List[Tuple[MethodSignature, MethodSignature]]:
        """Getter/setter pairs in emission order."""
        return [
            (self.methods[i], self.methods[i + 1])
            for i in range(0, len(self.methods) - 1, 2)
        ]


def _require(data: Dict[str, Any], key: str, expected: type, context: str) -> Any:
    if key not in data:
        raise SchemaError(f"Missing '{key}' in {context}")
    value = data[key]
    if not isinstance(value, expected):
        raise SchemaError(
            f"'{key}' in {context} must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _optional_flag(data: Dict[str, Any], key: str, context: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SchemaError(f"'{key}' in {context} must be a boolean")
    return value


def field_from_dict(data: Dict[str, Any], class_name: str = "?") -> FieldDescriptor:
    """
    Convert one field description to a FieldDescriptor.

    Args:
        data: Mapping with ``name``, ``type`` and optional ``static``/``ignored``
        class_name: Owning class, used in error messages

    Returns:
        FieldDescriptor
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Field entries of {class_name} must be objects")

    name = _require(data, "name", str, f"a field of {class_name}")
    context = f"field {class_name}.{name}"
    return FieldDescriptor(
        name=name,
        type_name=_require(data, "type", str, context),
        is_static=_optional_flag(data, "static", context),
        is_ignored=_optional_flag(data, "ignored", context),
    )


def schema_from_dict(data: Dict[str, Any]) -> ClassSchema:
    """
    Convert a class description to a ClassSchema.

    Args:
        data: Mapping with ``name`` and a ``fields`` list

    Returns:
        ClassSchema with fields in the listed order
    """
    if not isinstance(data, dict):
        raise SchemaError("Class description must be an object")

    class_name = _require(data, "name", str, "class description")
    raw_fields = data.get("fields", [])
    if not isinstance(raw_fields, list):
        raise SchemaError(f"'fields' of {class_name} must be a list")

    return ClassSchema(
        simple_class_name=class_name,
        fields=tuple(field_from_dict(item, class_name) for item in raw_fields),
    )


def load_schemas(data: Union[Dict[str, Any], List[Any]]) -> List[ClassSchema]:
    """
    Convert a JSON description to ClassSchema values.

    Accepts ``{"classes": [...]}``, a single class object, or a bare list
    of class objects. Class names must be unique.

    Returns:
        Schemas in document order
    """
    if isinstance(data, dict) and "classes" in data:
        items = data["classes"]
        if not isinstance(items, list):
            raise SchemaError("'classes' must be a list")
    elif isinstance(data, dict):
        items = [data]
    elif isinstance(data, list):
        items = data
    else:
        raise SchemaError(
            f"Schema description must be an object or list, got {type(data).__name__}"
        )

    schemas = []
    names = set()
    for item in items:
        schema = schema_from_dict(item)
        if schema.simple_class_name in names:
            raise SchemaError(f"Duplicate class '{schema.simple_class_name}'")
        names.add(schema.simple_class_name)
        schemas.append(schema)

    return schemas


def schema_to_dict(schema: ClassSchema) -> Dict[str, Any]:
    """Serialize a ClassSchema back to its JSON description."""
    return {
        "name": schema.simple_class_name,
        "fields": [
            {
                "name": f.name,
                "type": f.type_name,
                "static": f.is_static,
                "ignored": f.is_ignored,
            }
            for f in schema.fields
        ],
    }
