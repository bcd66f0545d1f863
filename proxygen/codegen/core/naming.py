"""
Naming conventions for generated accessor interfaces.

A naming convention maps field names to getter/setter method names and a
model class name to the generated interface name. Conventions must be pure:
the derived name depends on the input name alone.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .schema import ClassSchema


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Replace hyphens with underscores
    name = name.replace('-', '_')

    # Insert underscore before uppercase letters
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    # Convert to lowercase and clean up multiple underscores
    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return ''.join(part.capitalize() for part in to_snake_case(name).split('_') if part)


class NamingConvention(ABC):
    """Maps field and class names to generated method and type names."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in configuration (e.g. 'proxy')."""
        pass

    @abstractmethod
    def getter_name(self, field_name: str) -> str:
        pass

    @abstractmethod
    def setter_name(self, field_name: str) -> str:
        pass

    @abstractmethod
    def proxy_interface_name(self, class_name: str) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ProxyNamingConvention(NamingConvention):
    """
    Prefix convention used by the storage layer's runtime proxies.

    ``realmGet$name`` / ``realmSet$name``. Prepending a fixed prefix is
    injective, so distinct field names never collide.
    """

    GETTER_PREFIX = "realmGet$"
    SETTER_PREFIX = "realmSet$"
    INTERFACE_SUFFIX = "RealmProxyInterface"

    @property
    def name(self) -> str:
        return "proxy"

    def getter_name(self, field_name: str) -> str:
        return f"{self.GETTER_PREFIX}{field_name}"

    def setter_name(self, field_name: str) -> str:
        return f"{self.SETTER_PREFIX}{field_name}"

    def proxy_interface_name(self, class_name: str) -> str:
        return f"{class_name}{self.INTERFACE_SUFFIX}"


class BeanNamingConvention(NamingConvention):
    """
    JavaBeans-style accessors: ``getName`` / ``setName``.

    Only the first character is upper-cased, so ``aField`` and ``AField``
    map to the same accessors.
    """

    INTERFACE_SUFFIX = "ProxyInterface"

    @property
    def name(self) -> str:
        return "bean"

    @staticmethod
    def _capitalize(field_name: str) -> str:
        return field_name[:1].upper() + field_name[1:]

    def getter_name(self, field_name: str) -> str:
        return f"get{self._capitalize(field_name)}"

    def setter_name(self, field_name: str) -> str:
        return f"set{self._capitalize(field_name)}"

    def proxy_interface_name(self, class_name: str) -> str:
        return f"{class_name}{self.INTERFACE_SUFFIX}"


class SnakeNamingConvention(NamingConvention):
    """``get_<snake_name>`` / ``set_<snake_name>`` for Python protocols."""

    INTERFACE_SUFFIX = "ProxyInterface"

    @property
    def name(self) -> str:
        return "snake"

    def getter_name(self, field_name: str) -> str:
        return f"get_{to_snake_case(field_name)}"

    def setter_name(self, field_name: str) -> str:
        return f"set_{to_snake_case(field_name)}"

    def proxy_interface_name(self, class_name: str) -> str:
        return f"{to_pascal_case(class_name)}{self.INTERFACE_SUFFIX}"


@dataclass(frozen=True)
class NameCollision:
    """Two or more eligible fields deriving the same method name."""

    method_name: str
    field_names: Tuple[str, ...]

    def __str__(self) -> str:
        fields = ", ".join(self.field_names)
        return f"{self.method_name} (from fields: {fields})"


def find_name_collisions(
    schema: ClassSchema, convention: NamingConvention
) -> List[NameCollision]:
    """
    Find derived method names shared by distinct eligible fields.

    Getter and setter names are checked together, so a getter that equals
    another field's setter is reported as well.

    Returns:
        Collisions ordered by first occurrence (empty if none)
    """
    owners: Dict[str, List[str]] = {}

    for descriptor in schema.eligible_fields():
        for method_name in (
            convention.getter_name(descriptor.name),
            convention.setter_name(descriptor.name),
        ):
            owners.setdefault(method_name, [])
            if descriptor.name not in owners[method_name]:
                owners[method_name].append(descriptor.name)

    return [
        NameCollision(method_name, tuple(field_names))
        for method_name, field_names in owners.items()
        if len(field_names) > 1
    ]


NAMING_CONVENTIONS = {
    "proxy": ProxyNamingConvention,
    "bean": BeanNamingConvention,
    "snake": SnakeNamingConvention,
}


def get_naming_convention(name: str) -> NamingConvention:
    """Create a naming convention by its configuration name."""
    try:
        return NAMING_CONVENTIONS[name.lower()]()
    except KeyError:
        available = ", ".join(sorted(NAMING_CONVENTIONS))
        raise ValueError(f"Unknown naming convention: {name}. Available: {available}")
