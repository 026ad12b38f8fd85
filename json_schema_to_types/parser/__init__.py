"""
Schema parser.

Turns JSON Schema documents into flat type dictionaries:

1. Scope: resolve each node's "id" against its parent's scope
2. Path: give each node its canonical type path
3. Dispatch: classify the node's shape and pick an interpreter
4. Walk: let the interpreter recurse into every nested child
5. Aggregate: fold the per-document results into one schema dictionary
"""

from __future__ import annotations

from .aggregator import (
    ParseReport,
    load_schema_file,
    merge_schemas,
    parse_schema_documents,
    parse_schema_documents_report,
    parse_schema_files,
)
from .document import parse_schema
from .predicates import DISPATCH_ORDER, NodeShape, classify
from .walker import TypeWalker, merge_types

__all__ = [
    "DISPATCH_ORDER",
    "NodeShape",
    "ParseReport",
    "TypeWalker",
    "classify",
    "load_schema_file",
    "merge_schemas",
    "merge_types",
    "parse_schema",
    "parse_schema_documents",
    "parse_schema_documents_report",
    "parse_schema_files",
]
