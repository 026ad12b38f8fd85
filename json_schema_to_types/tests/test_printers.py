import json
from pathlib import Path
from unittest import TestCase

from json_schema_to_types.errors import PrinterNotFoundError
from json_schema_to_types.parser import parse_schema, parse_schema_files
from json_schema_to_types.printers import PrinterRegistry, ReportPrinter, TypePrinter, describe_type, resolve_reference
from json_schema_to_types.type_definitions import EnumType, ObjectType, TypeKind

TEST_DATA = Path(__file__).parent / "test_data"


class NamePrinter(TypePrinter):
    """Prints the name and kind of each type."""

    def print_type(self, type_def, schema_def, schema_dict):
        return f"type {type_def.name}: {type_def.kind.value}"

    def print_decoder(self, type_def, schema_def, schema_dict):
        return f"decode {type_def.name}"

    def print_encoder(self, type_def, schema_def, schema_dict):
        # Not every kind needs an encoder
        return ""


class TestPrinterRegistry(TestCase):
    def setUp(self):
        self.schema_dict = parse_schema_files([TEST_DATA / "circle.json", TEST_DATA / "definitions.json"], "Shapes")
        self.circle = self.schema_dict["http://example.com/circle.json"]

    def test_print_schema_in_path_order(self):
        registry = PrinterRegistry({kind: NamePrinter() for kind in TypeKind})
        out = registry.print_schema(self.circle, self.schema_dict)
        self.assertEqual(
            out.split("\n\n"),
            [
                "type #: object",
                "decode #",
                "type center: reference",
                "decode center",
                "type color: reference",
                "decode color",
                "type radius: primitive",
                "decode radius",
            ],
        )

    def test_missing_printer(self):
        registry = PrinterRegistry()
        registry.register(TypeKind.OBJECT, NamePrinter())
        with self.assertRaises(PrinterNotFoundError):
            registry.print_schema(self.circle, self.schema_dict)

    def test_resolve_cross_document_reference(self):
        center = self.circle.types["#/properties/center"]
        target, owner = resolve_reference(center, self.circle, self.schema_dict)
        self.assertIsInstance(target, ObjectType)
        self.assertEqual(owner.id, "http://example.com/definitions.json")

        color = self.circle.types["#/properties/color"]
        target, _ = resolve_reference(color, self.circle, self.schema_dict)
        self.assertIsInstance(target, EnumType)
        self.assertEqual(target.values, ("red", "yellow", "green", "blue"))

    def test_resolve_local_reference(self):
        with open(TEST_DATA / "link.json") as f:
            schema_dict = parse_schema(json.load(f), "Link")
        schema = schema_dict["http://x/schema"]
        target, owner = resolve_reference(schema.types["#/properties/self"], schema, schema_dict)
        self.assertEqual(target.primitive_kind, "string")
        self.assertIs(owner, schema)

    def test_unresolvable_reference(self):
        circle_only = {self.circle.id: self.circle}
        self.assertIsNone(resolve_reference(self.circle.types["#/properties/center"], self.circle, circle_only))


class TestReportPrinter(TestCase):
    def test_render(self):
        schema_dict = parse_schema_files([TEST_DATA / "link.json", TEST_DATA / "unresolvable.json"], "Links")
        out = ReportPrinter().render(schema_dict)

        self.assertIn("http://x/schema (Link)", out)
        self.assertIn("  module: Links", out)
        self.assertIn("  description: A document with a self link", out)
        self.assertIn("  #: object {self?}", out)
        self.assertIn("  #/definitions/link: string", out)
        self.assertIn("  #/properties/self: reference -> http://x/schema#/definitions/link", out)
        self.assertIn("  ! #/properties/when: unresolvable shape (keys: format)", out)

    def test_describe_type(self):
        schema_dict = parse_schema_files([TEST_DATA / "shapes.json"], "Shapes")
        types = schema_dict["http://example.com/shapes.json"].types
        self.assertEqual(describe_type(types["#/definitions/nullable_name"]), "string | null")
        self.assertEqual(describe_type(types["#/properties/tags"]), "array of #/properties/tags/items")
        self.assertEqual(describe_type(types["#/properties/pair"]), "tuple (#/properties/pair/items/0, #/properties/pair/items/1)")
        self.assertEqual(describe_type(types["#/properties/pair/items/1"]), "enum<integer> [1, 2]")
        self.assertEqual(describe_type(types["#/properties/either"]), "anyOf (#/properties/either/anyOf/0, #/properties/either/anyOf/1)")
