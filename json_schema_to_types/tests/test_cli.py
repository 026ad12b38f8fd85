#!/usr/bin/env python3

import json
from pathlib import Path

from click.testing import CliRunner

from json_schema_to_types.json_schema_to_types import json_schema_to_types

TEST_DATA = Path(__file__).parent / "test_data"


class TestCli:
    """Test cases for the command line tool"""

    def test_report_to_stdout(self):
        result = CliRunner().invoke(json_schema_to_types, [str(TEST_DATA / "circle.json"), str(TEST_DATA / "definitions.json")])
        assert result.exit_code == 0, result.output
        assert "http://example.com/circle.json (Circle)" in result.output
        assert "  module: Circle" in result.output
        assert "  #/definitions/point: object {x, y}" in result.output

    def test_module_name_option(self):
        result = CliRunner().invoke(json_schema_to_types, ["-m", "Geometry", str(TEST_DATA / "link.json")])
        assert result.exit_code == 0, result.output
        assert "  module: Geometry" in result.output

    def test_report_to_file(self, tmp_path):
        output = tmp_path / "report.txt"
        result = CliRunner().invoke(json_schema_to_types, ["-o", str(output), str(TEST_DATA / "link.json")])
        assert result.exit_code == 0, result.output
        assert "#/properties/self: reference" in output.read_text()

    def test_unsupported_version_fails(self):
        result = CliRunner().invoke(json_schema_to_types, [str(TEST_DATA / "bad_version.json")])
        assert result.exit_code == 1
        assert "Unsupported schema version" in result.output

    def test_dispatch_failure_sets_exit_code(self):
        result = CliRunner().invoke(json_schema_to_types, [str(TEST_DATA / "unresolvable.json")])
        assert result.exit_code == 1
        assert "unresolvable shape" in result.output

    def test_strict_flag(self):
        result = CliRunner().invoke(json_schema_to_types, ["--strict", str(TEST_DATA / "unresolvable.json")])
        assert result.exit_code == 1
        assert "Could not determine parser" in result.output

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"skip_invalid_documents": True}))
        result = CliRunner().invoke(json_schema_to_types, ["-c", str(config), str(TEST_DATA / "bad_version.json"), str(TEST_DATA / "link.json")])
        assert result.exit_code == 1
        assert "http://x/schema (Link)" in result.output
        assert "error: Unsupported schema version" in result.output

    def test_invalid_json_fails(self, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text('{"id": ')
        result = CliRunner().invoke(json_schema_to_types, [str(broken)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
        assert not isinstance(result.exception, json.JSONDecodeError)
