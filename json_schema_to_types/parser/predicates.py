"""
Shape classification of raw schema nodes.

The dispatch order below is a priority chain: the first predicate that
matches decides how a node is interpreted. A node carrying "$ref" is always
a reference, whatever else it declares; an "enum" wins over its "type"; a
composition keyword wins over "type": "object".
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

PRIMITIVE_KINDS = frozenset({"null", "boolean", "integer", "number", "string"})


class NodeShape(Enum):
    """Structural shape of a schema node."""

    REFERENCE = "reference"
    ENUM = "enum"
    UNION = "union"
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    OBJECT = "object"
    ARRAY = "array"
    TUPLE = "tuple"
    PRIMITIVE = "primitive"
    DEFINITIONS = "definitions"


# Shapes a document root may be promoted to
ROOT_SHAPES = frozenset({NodeShape.REFERENCE, NodeShape.OBJECT, NodeShape.ARRAY, NodeShape.TUPLE})


def is_ref_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("$ref"), str)


def is_enum_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("enum"), list)


def is_union_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("type"), list)


def is_all_of_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("allOf"), list)


def is_any_of_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("anyOf"), list)


def is_one_of_type(node: dict[str, Any]) -> bool:
    return isinstance(node.get("oneOf"), list)


def is_object_type(node: dict[str, Any]) -> bool:
    if "type" not in node:
        return isinstance(node.get("properties"), dict)
    return node["type"] == "object"


def is_array_type(node: dict[str, Any]) -> bool:
    return node.get("type") == "array" and ("items" not in node or isinstance(node["items"], dict))


def is_tuple_type(node: dict[str, Any]) -> bool:
    return node.get("type") == "array" and isinstance(node.get("items"), list)


def is_primitive_type(node: dict[str, Any]) -> bool:
    return node.get("type") in PRIMITIVE_KINDS


def has_definitions(node: dict[str, Any]) -> bool:
    return isinstance(node.get("definitions"), dict)


DISPATCH_ORDER: tuple[tuple[NodeShape, Callable[[dict[str, Any]], bool]], ...] = (
    (NodeShape.REFERENCE, is_ref_type),
    (NodeShape.ENUM, is_enum_type),
    (NodeShape.UNION, is_union_type),
    (NodeShape.ALL_OF, is_all_of_type),
    (NodeShape.ANY_OF, is_any_of_type),
    (NodeShape.ONE_OF, is_one_of_type),
    (NodeShape.OBJECT, is_object_type),
    (NodeShape.ARRAY, is_array_type),
    (NodeShape.TUPLE, is_tuple_type),
    (NodeShape.PRIMITIVE, is_primitive_type),
    (NodeShape.DEFINITIONS, has_definitions),
)


def classify(node: Any) -> NodeShape | None:
    """
    Determine the shape of a schema node.

    Args:
        node: The raw schema node

    Returns:
        The first matching NodeShape, or None if nothing matches
    """
    if not isinstance(node, dict):
        return None

    for shape, predicate in DISPATCH_ORDER:
        if predicate(node):
            return shape
    return None
