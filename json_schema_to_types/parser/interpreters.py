"""
Structural interpreters, one per node shape.

Each interpreter receives the walker, the raw node, the scope for its
children, its own resolved id, its canonical path and its name, and returns
a type dictionary with the node itself plus every descendant. Children are
parsed by calling back into the walker.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..scope import resolve_reference
from ..type_definitions import (
    AllOfType,
    AnyOfType,
    ArrayType,
    EnumType,
    ObjectType,
    OneOfType,
    PrimitiveType,
    TupleType,
    TypeDefinition,
    TypeDictionary,
    TypeReference,
    UnionType,
)
from ..type_path import TypePath
from .predicates import NodeShape

if TYPE_CHECKING:
    from .walker import TypeWalker

Interpreter = Callable[["TypeWalker", dict[str, Any], str, "str | None", TypePath, str], TypeDictionary]


def _single(type_def: TypeDefinition) -> TypeDictionary:
    return {str(type_def.path): type_def}


def infer_primitive_kind(value: Any) -> str:
    """Infer the JSON Schema type of a Python value."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return "object"


def parse_reference(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    """Parse a "$ref" node; the target is recorded, not dereferenced."""
    target_uri, fragment = resolve_reference(node["$ref"], scope)
    return _single(
        TypeReference(
            name=name,
            path=path,
            id=node_id,
            target_path=TypePath.from_string(fragment),
            target_uri=target_uri,
        )
    )


def parse_enum(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    values = tuple(node["enum"])

    primitive_kind = node.get("type")
    if not isinstance(primitive_kind, str):
        primitive_kind = infer_primitive_kind(values[0]) if values else "string"

    return _single(EnumType(name=name, path=path, id=node_id, primitive_kind=primitive_kind, values=values))


def parse_union(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    variants = tuple(str(variant) for variant in node["type"])
    return _single(UnionType(name=name, path=path, id=node_id, variants=variants))


def _parse_branches(walker: TypeWalker, node: dict[str, Any], keyword: str, scope: str, path: TypePath, types: TypeDictionary) -> tuple[TypePath, ...]:
    branch_paths = []
    container = path.add_child(keyword)
    for index, branch in enumerate(node[keyword]):
        branch_path = walker.parse_child(branch, scope, container, index, types)
        if branch_path is not None:
            branch_paths.append(branch_path)
    return tuple(branch_paths)


def parse_all_of(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    types: TypeDictionary = {}
    branches = _parse_branches(walker, node, "allOf", scope, path, types)
    types[str(path)] = AllOfType(name=name, path=path, id=node_id, branch_paths=branches)
    return types


def parse_any_of(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    types: TypeDictionary = {}
    branches = _parse_branches(walker, node, "anyOf", scope, path, types)
    types[str(path)] = AnyOfType(name=name, path=path, id=node_id, branch_paths=branches)
    return types


def parse_one_of(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    types: TypeDictionary = {}
    branches = _parse_branches(walker, node, "oneOf", scope, path, types)
    types[str(path)] = OneOfType(name=name, path=path, id=node_id, branch_paths=branches)
    return types


def parse_object(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    """
    Parse an object node.

    Properties whose shape cannot be determined are left out of the
    property map but stay listed in `required` as declared.
    """
    types: TypeDictionary = {}
    properties: dict[str, TypePath] = {}

    raw_properties = node.get("properties")
    if isinstance(raw_properties, dict):
        container = path.add_child("properties")
        for prop_name, prop_node in raw_properties.items():
            prop_path = walker.parse_child(prop_node, scope, container, prop_name, types)
            if prop_path is not None:
                properties[prop_name] = prop_path

    required = node.get("required")
    required = tuple(required) if isinstance(required, list) else ()

    types[str(path)] = ObjectType(name=name, path=path, id=node_id, properties=properties, required=required)
    return types


def parse_array(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    types: TypeDictionary = {}
    item_path = None
    if "items" in node:
        item_path = walker.parse_child(node["items"], scope, path, "items", types)

    types[str(path)] = ArrayType(name=name, path=path, id=node_id, item_path=item_path)
    return types


def parse_tuple(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    types: TypeDictionary = {}
    item_paths = []
    container = path.add_child("items")
    for index, item in enumerate(node["items"]):
        item_path = walker.parse_child(item, scope, container, index, types)
        if item_path is not None:
            item_paths.append(item_path)

    types[str(path)] = TupleType(name=name, path=path, id=node_id, item_paths=tuple(item_paths))
    return types


def parse_primitive(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    return _single(PrimitiveType(name=name, path=path, id=node_id, primitive_kind=node["type"]))


def parse_definitions(walker: TypeWalker, node: dict[str, Any], scope: str, node_id: str | None, path: TypePath, name: str) -> TypeDictionary:
    """
    Parse every entry of a "definitions" block.

    Entries land at "<path>/definitions/<key>". The block itself has no
    type of its own.
    """
    types: TypeDictionary = {}
    container = path.add_child("definitions")
    for key, definition in node["definitions"].items():
        walker.parse_child(definition, scope, container, key, types)
    return types


INTERPRETERS: dict[NodeShape, Interpreter] = {
    NodeShape.REFERENCE: parse_reference,
    NodeShape.ENUM: parse_enum,
    NodeShape.UNION: parse_union,
    NodeShape.ALL_OF: parse_all_of,
    NodeShape.ANY_OF: parse_any_of,
    NodeShape.ONE_OF: parse_one_of,
    NodeShape.OBJECT: parse_object,
    NodeShape.ARRAY: parse_array,
    NodeShape.TUPLE: parse_tuple,
    NodeShape.PRIMITIVE: parse_primitive,
    NodeShape.DEFINITIONS: parse_definitions,
}
