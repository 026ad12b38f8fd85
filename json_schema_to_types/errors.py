"""
Errors raised while turning schema documents into a type model.
"""

from __future__ import annotations


class SchemaParseError(Exception):
    """Base class for every parsing failure.

    Attributes:
        schema_id: Id of the document being parsed, when known
    """

    def __init__(self, message: str, schema_id: str | None = None):
        super().__init__(message)
        self.schema_id = schema_id


class UnsupportedVersionError(SchemaParseError):
    """The document's "$schema" is missing or not a supported meta-schema."""

    def __init__(self, declared: object, supported: list[str]):
        super().__init__(f"Unsupported schema version {declared!r}, expected one of {supported}")
        self.declared = declared
        self.supported = supported


class MissingIdentifierError(SchemaParseError):
    """The document root has no string "id"."""

    def __init__(self):
        super().__init__("JSON schema has no 'id' property")


class PathCollisionError(SchemaParseError):
    """Two nodes of one document resolved to the same type path."""

    def __init__(self, path: str, existing: object, duplicate: object, schema_id: str | None = None):
        super().__init__(
            f"Collision in type dict, found two values {existing!r} and {duplicate!r} for key '{path}'",
            schema_id,
        )
        self.path = path


class IdCollisionError(SchemaParseError):
    """Two documents of one run share the same schema id."""

    def __init__(self, schema_id: str):
        super().__init__(f"Collision in schema dict, found two schemas with id '{schema_id}'", schema_id)


class UnresolvableShapeError(SchemaParseError):
    """No interpreter matches a node (raised only in strict mode)."""

    def __init__(self, path: str, keys: tuple[str, ...]):
        super().__init__(f"Could not determine parser for node at '{path}' with keys {list(keys)}")
        self.path = path
        self.keys = keys


class SchemaCycleError(SchemaParseError):
    """A node was reached again while it was still being resolved."""

    def __init__(self, path: str):
        super().__init__(f"Cycle detected while resolving '{path}'")
        self.path = path


class RecursionDepthError(SchemaParseError):
    """Schema nesting exceeds the configured maximum depth."""

    def __init__(self, path: str, max_depth: int):
        super().__init__(f"Schema nesting at '{path}' exceeds the maximum depth of {max_depth}")
        self.path = path
        self.max_depth = max_depth


class PrinterNotFoundError(Exception):
    """No printer is registered for a type kind."""

    pass
