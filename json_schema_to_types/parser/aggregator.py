"""
Aggregation of several schema documents into one schema dictionary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import ParserConfig
from ..errors import IdCollisionError, SchemaParseError
from ..type_definitions import DispatchFailure, SchemaDictionary
from .document import parse_schema

logger = logging.getLogger(__name__)


@dataclass
class ParseReport:
    """Outcome of parsing a batch of documents.

    Attributes:
        schemas: Schema dictionary built from every document that parsed
        errors: Document-fatal errors of skipped documents, in input order
    """

    schemas: SchemaDictionary = field(default_factory=dict)
    errors: list[SchemaParseError] = field(default_factory=list)

    @property
    def dispatch_failures(self) -> dict[str, tuple[DispatchFailure, ...]]:
        """Dispatch failures per schema id, for schemas that have any."""
        return {schema_id: schema.dispatch_failures for schema_id, schema in self.schemas.items() if schema.dispatch_failures}

    @property
    def ok(self) -> bool:
        return not self.errors and not self.dispatch_failures


def merge_schemas(target: SchemaDictionary, source: SchemaDictionary) -> SchemaDictionary:
    """
    Merge source into target, refusing duplicate schema ids.

    Raises:
        IdCollisionError: If a schema id is present in both dictionaries
    """
    for schema_id, schema in source.items():
        if schema_id in target:
            logger.error("Collision in schema dict, found two schemas with id '%s'", schema_id)
            raise IdCollisionError(schema_id)
        target[schema_id] = schema
    return target


def parse_schema_documents_report(
    documents: Iterable[dict[str, Any]], module_name: str, config: ParserConfig | None = None
) -> ParseReport:
    """
    Parse documents in order and fold them into one schema dictionary.

    Document-fatal errors abort the run unless `skip_invalid_documents` is
    set, in which case the document is left out and the error recorded.
    An id collision always aborts.
    """
    config = config or ParserConfig()
    report = ParseReport()

    for index, document in enumerate(documents):
        try:
            schema_dict = parse_schema(document, module_name, config)
        except SchemaParseError as e:
            if not config.skip_invalid_documents:
                raise
            logger.error("Skipping document %d: %s", index, e)
            report.errors.append(e)
            continue

        merge_schemas(report.schemas, schema_dict)

    return report


def parse_schema_documents(
    documents: Iterable[dict[str, Any]], module_name: str, config: ParserConfig | None = None
) -> SchemaDictionary:
    """
    Parse documents in order and fold them into one schema dictionary.

    Args:
        documents: Decoded JSON Schema documents
        module_name: Module name stored on every SchemaDefinition
        config: Parser configuration

    Returns:
        Schema dictionary keyed by schema id
    """
    return parse_schema_documents_report(documents, module_name, config).schemas


def load_schema_file(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def parse_schema_files(paths: Iterable[str | Path], module_name: str, config: ParserConfig | None = None) -> SchemaDictionary:
    """Load each path as JSON and parse the documents in order."""
    return parse_schema_documents((load_schema_file(path) for path in paths), module_name, config)
