"""JSON Schema to Types

A Python package for turning JSON Schema (draft-04) documents into a
fully resolved, addressable type model for code-emitting printers.
Resolves identifier scopes, gives every node a canonical type path and
folds several documents into one schema dictionary.
"""

__version__ = "1.0.0"

from .config import DRAFT_04_SCHEMA, ParserConfig
from .errors import (
    IdCollisionError,
    MissingIdentifierError,
    PathCollisionError,
    RecursionDepthError,
    SchemaCycleError,
    SchemaParseError,
    UnresolvableShapeError,
    UnsupportedVersionError,
)
from .parser import ParseReport, parse_schema, parse_schema_documents, parse_schema_documents_report, parse_schema_files
from .type_definitions import SchemaDefinition, TypeDefinition, TypeKind
from .type_path import TypePath

__all__ = [
    "DRAFT_04_SCHEMA",
    "ParserConfig",
    "ParseReport",
    "SchemaDefinition",
    "TypeDefinition",
    "TypeKind",
    "TypePath",
    "parse_schema",
    "parse_schema_documents",
    "parse_schema_documents_report",
    "parse_schema_files",
    "SchemaParseError",
    "UnsupportedVersionError",
    "MissingIdentifierError",
    "PathCollisionError",
    "IdCollisionError",
    "UnresolvableShapeError",
    "SchemaCycleError",
    "RecursionDepthError",
]
