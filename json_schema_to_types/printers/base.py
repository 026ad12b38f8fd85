"""
Interface between the parser and code-emitting printers.

A printer renders one type definition into three pieces of target-language
text: the type declaration, a decoder and an encoder. The parser does not
know the target language; it only hands over the variant-tagged model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from urllib.parse import urldefrag

from ..errors import PrinterNotFoundError
from ..type_definitions import SchemaDefinition, SchemaDictionary, TypeDefinition, TypeKind, TypeReference


class TypePrinter(ABC):
    """Abstract base class for printers of one type kind."""

    @abstractmethod
    def print_type(self, type_def: TypeDefinition, schema_def: SchemaDefinition, schema_dict: SchemaDictionary) -> str:
        """Render the type declaration."""

    @abstractmethod
    def print_decoder(self, type_def: TypeDefinition, schema_def: SchemaDefinition, schema_dict: SchemaDictionary) -> str:
        """Render the decoder."""

    @abstractmethod
    def print_encoder(self, type_def: TypeDefinition, schema_def: SchemaDefinition, schema_dict: SchemaDictionary) -> str:
        """Render the encoder."""


class PrinterRegistry:
    """Maps each type kind to the printer responsible for it."""

    def __init__(self, printers: dict[TypeKind, TypePrinter] | None = None):
        self._printers: dict[TypeKind, TypePrinter] = dict(printers or {})

    def register(self, kind: TypeKind, printer: TypePrinter) -> None:
        self._printers[kind] = printer

    def printer_for(self, type_def: TypeDefinition) -> TypePrinter:
        """
        Get the printer of a type definition.

        Raises:
            PrinterNotFoundError: If no printer is registered for its kind
        """
        try:
            return self._printers[type_def.kind]
        except KeyError:
            raise PrinterNotFoundError(f"No printer registered for {type_def.kind.value} type at '{type_def.path}'") from None

    def print_schema(self, schema_def: SchemaDefinition, schema_dict: SchemaDictionary) -> str:
        """
        Render every type of a schema, in path order.

        For each type the declaration, decoder and encoder are emitted in
        that order; empty renderings are skipped.
        """
        sections = []
        for path in sorted(schema_def.types):
            type_def = schema_def.types[path]
            printer = self.printer_for(type_def)
            for render in (printer.print_type, printer.print_decoder, printer.print_encoder):
                text = render(type_def, schema_def, schema_dict)
                if text:
                    sections.append(text)
        return "\n\n".join(sections)


def resolve_reference(
    reference: TypeReference, schema_def: SchemaDefinition, schema_dict: SchemaDictionary
) -> tuple[TypeDefinition, SchemaDefinition] | None:
    """
    Look up the target of a reference.

    The target document is the one whose id, without fragment, equals the
    reference's target URI.

    Returns:
        (target type, owning schema), or None if the target is not among
        the supplied documents
    """
    if not reference.target_uri or reference.target_uri == urldefrag(schema_def.id).url:
        target_schema = schema_def
    else:
        target_schema = next((s for s in schema_dict.values() if urldefrag(s.id).url == reference.target_uri), None)

    if target_schema is None:
        return None

    target = target_schema.get_type(reference.target_path)
    if target is None:
        return None
    return target, target_schema
