import sys
from unittest import TestCase

from json_schema_to_types.config import DRAFT_04_SCHEMA, ParserConfig
from json_schema_to_types.utils import module_name_from_path


class TestParserConfig(TestCase):
    def test_defaults(self):
        config = ParserConfig()
        self.assertEqual(config.supported_versions, [DRAFT_04_SCHEMA])
        self.assertFalse(config.strict)
        self.assertFalse(config.skip_invalid_documents)
        self.assertLess(config.max_depth * 4, sys.getrecursionlimit())

    def test_from_dict_ignores_unknown_keys(self):
        config = ParserConfig.from_dict({"strict": True, "max_depth": 8, "language": "elm"})
        self.assertTrue(config.strict)
        self.assertEqual(config.max_depth, 8)
        self.assertFalse(hasattr(config, "language"))

    def test_to_dict(self):
        config = ParserConfig(skip_invalid_documents=True)
        self.assertEqual(ParserConfig.from_dict(config.to_dict()), config)


class TestModuleName(TestCase):
    def test_module_name_from_path(self):
        self.assertEqual(module_name_from_path("definitions.json"), "Definitions")
        self.assertEqual(module_name_from_path("/tmp/circle_shape.schema.json"), "CircleShape")
        self.assertEqual(module_name_from_path("user-profile.json"), "UserProfile")
