"""
Parsing of a single schema document.

Handles the parts that only exist at document level: the version gate,
the mandatory root "id", the "definitions" block and the promotion of the
root node to a type of its own.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import ParserConfig
from ..errors import MissingIdentifierError, UnsupportedVersionError
from ..type_definitions import SchemaDefinition, SchemaDictionary, TypeDictionary
from ..type_path import ROOT_SEGMENT, TypePath
from .interpreters import parse_definitions
from .predicates import ROOT_SHAPES, classify, has_definitions
from .walker import TypeWalker, merge_types

logger = logging.getLogger(__name__)


def is_supported_version(document: dict[str, Any], config: ParserConfig) -> bool:
    """Check the document's "$schema" against the supported meta-schemas."""
    return document.get("$schema") in config.supported_versions


def parse_schema_id(document: dict[str, Any]) -> str:
    """
    Read the mandatory root "id".

    Raises:
        MissingIdentifierError: If the root has no string "id"
    """
    schema_id = document.get("id")
    if not isinstance(schema_id, str):
        raise MissingIdentifierError()
    return schema_id


def parse_root_definitions(walker: TypeWalker, document: dict[str, Any], schema_id: str) -> TypeDictionary:
    """Parse the root "definitions" block into "#/definitions/<key>" entries."""
    if not has_definitions(document):
        return {}
    return parse_definitions(walker, document, schema_id, None, TypePath.root(), ROOT_SEGMENT)


def parse_root_type(walker: TypeWalker, document: dict[str, Any], schema_id: str) -> TypeDictionary:
    """
    Parse the document root as a type at "#".

    Only a reference, object, array or tuple root becomes a type; any other
    root contributes nothing beyond its definitions.
    """
    if classify(document) not in ROOT_SHAPES:
        logger.debug("Found no valid root type in '%s'", schema_id)
        return {}
    return walker.parse_type(document, schema_id, TypePath(), ROOT_SEGMENT)


def parse_schema(document: dict[str, Any], module_name: str, config: ParserConfig | None = None) -> SchemaDictionary:
    """
    Parse one schema document.

    Args:
        document: The decoded JSON Schema document
        module_name: Module name stored verbatim for the printers
        config: Parser configuration

    Returns:
        Schema dictionary with a single entry keyed by the document id

    Raises:
        UnsupportedVersionError: If "$schema" is missing or not supported
        MissingIdentifierError: If the root has no string "id"
        PathCollisionError: If two nodes resolve to the same path
        UnresolvableShapeError: In strict mode, if a node matches no shape
    """
    config = config or ParserConfig()

    if not isinstance(document, dict) or not is_supported_version(document, config):
        declared = document.get("$schema") if isinstance(document, dict) else None
        raise UnsupportedVersionError(declared, config.supported_versions)

    schema_id = parse_schema_id(document)
    title = document.get("title", "")
    description = document.get("description")

    logger.debug("Parsing schema '%s'", schema_id)
    walker = TypeWalker(schema_id, config)

    definitions = parse_root_definitions(walker, document, schema_id)
    root = parse_root_type(walker, document, schema_id)

    types: TypeDictionary = {}
    merge_types(types, definitions, schema_id)
    merge_types(types, root, schema_id)

    schema = SchemaDefinition(
        id=schema_id,
        title=title,
        module_name=module_name,
        description=description,
        types=types,
        dispatch_failures=tuple(walker.dispatch_failures),
    )
    return {schema_id: schema}
