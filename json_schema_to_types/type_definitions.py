"""
Type model produced by the parser.

Every resolvable schema node becomes exactly one TypeDefinition, stored in
a flat type dictionary keyed by the rendered TypePath of the node. Nested
types are referred to by path, never embedded, so printers look them up in
the same dictionary.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from .type_path import TypePath

# Keyed by str(TypePath)
TypeDictionary = dict[str, "TypeDefinition"]

# Keyed by schema id
SchemaDictionary = dict[str, "SchemaDefinition"]


class TypeKind(Enum):
    """Kind of a type definition."""

    REFERENCE = "reference"  # $ref to another node
    PRIMITIVE = "primitive"  # string, integer, number, boolean, null
    ENUM = "enum"  # enum of primitive values
    ARRAY = "array"  # list[T]
    TUPLE = "tuple"  # tuple[T, U, ...]
    OBJECT = "object"  # properties
    UNION = "union"  # "type": [...]
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"


@dataclass(frozen=True)
class TypeDefinition:
    """Base class for all type definitions."""

    kind: ClassVar[TypeKind]

    name: str = ""
    path: TypePath = field(default_factory=TypePath)

    # Resolved "id" of the node, if it declares one
    id: str | None = None


@dataclass(frozen=True)
class TypeReference(TypeDefinition):
    """
    A "$ref" to another node, kept unresolved.

    Example:
        "self": {"$ref": "#/definitions/link"}

    becomes TypeReference(name="self", path="#/properties/self",
    target_path="#/definitions/link", target_uri=<id of the document>).
    """

    kind: ClassVar[TypeKind] = TypeKind.REFERENCE

    target_path: TypePath = field(default_factory=TypePath.root)

    # Absolute URI of the referenced document (fragment stripped)
    target_uri: str = ""


@dataclass(frozen=True)
class PrimitiveType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.PRIMITIVE

    primitive_kind: str = ""


@dataclass(frozen=True)
class EnumType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.ENUM

    primitive_kind: str = ""
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class ArrayType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.ARRAY

    # None when "items" is absent
    item_path: TypePath | None = None


@dataclass(frozen=True)
class TupleType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.TUPLE

    item_paths: tuple[TypePath, ...] = ()


@dataclass(frozen=True)
class ObjectType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.OBJECT

    # Property name -> path of the property's type, in declaration order
    properties: Mapping[str, TypePath] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True)
class UnionType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.UNION

    # Primitive kinds listed in "type"
    variants: tuple[str, ...] = ()


@dataclass(frozen=True)
class AllOfType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.ALL_OF

    branch_paths: tuple[TypePath, ...] = ()


@dataclass(frozen=True)
class AnyOfType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.ANY_OF

    branch_paths: tuple[TypePath, ...] = ()


@dataclass(frozen=True)
class OneOfType(TypeDefinition):
    kind: ClassVar[TypeKind] = TypeKind.ONE_OF

    branch_paths: tuple[TypePath, ...] = ()


@dataclass(frozen=True)
class DispatchFailure:
    """A node whose shape matched no interpreter."""

    path: str = ""
    keys: tuple[str, ...] = ()


@dataclass(frozen=True)
class SchemaDefinition:
    """A fully parsed schema document."""

    id: str = ""
    title: str = ""
    module_name: str = ""
    description: str | None = None
    types: Mapping[str, TypeDefinition] = field(default_factory=dict)
    dispatch_failures: tuple[DispatchFailure, ...] = ()

    def __post_init__(self):
        # Freeze the dictionary handed in by the parser
        object.__setattr__(self, "types", MappingProxyType(dict(self.types)))

    def get_type(self, path: TypePath | str) -> TypeDefinition | None:
        """Look a type up by path."""
        return self.types.get(str(path))
