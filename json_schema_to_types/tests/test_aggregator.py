import json
from pathlib import Path

import pytest

from json_schema_to_types.config import DRAFT_04_SCHEMA, ParserConfig
from json_schema_to_types.errors import IdCollisionError, MissingIdentifierError, RecursionDepthError, UnsupportedVersionError
from json_schema_to_types.parser import (
    merge_schemas,
    parse_schema,
    parse_schema_documents,
    parse_schema_documents_report,
    parse_schema_files,
)

TEST_DATA = Path(__file__).parent / "test_data"


def load(name):
    with open(TEST_DATA / name) as f:
        return json.load(f)


def document(schema_id):
    return {"$schema": DRAFT_04_SCHEMA, "id": schema_id, "type": "object", "properties": {"a": {"type": "string"}}}


def test_two_documents_with_distinct_ids():
    schema_dict = parse_schema_documents([document("http://a/one"), document("http://a/two")], "Module")
    assert list(schema_dict) == ["http://a/one", "http://a/two"]
    assert all(schema.module_name == "Module" for schema in schema_dict.values())


def test_duplicate_ids_abort():
    with pytest.raises(IdCollisionError) as excinfo:
        parse_schema_documents([document("http://a/one"), document("http://a/one")], "Module")
    assert excinfo.value.schema_id == "http://a/one"


def test_first_collision_is_reported():
    documents = [document("http://a/one"), document("http://a/two"), document("http://a/two"), document("http://a/one")]
    with pytest.raises(IdCollisionError) as excinfo:
        parse_schema_documents(documents, "Module")
    assert excinfo.value.schema_id == "http://a/two"


def test_fatal_document_error_aborts_by_default():
    with pytest.raises(UnsupportedVersionError):
        parse_schema_documents([document("http://a/one"), load("bad_version.json")], "Module")


def test_skip_invalid_documents():
    missing_id = document("http://a/three")
    del missing_id["id"]
    config = ParserConfig(skip_invalid_documents=True)

    report = parse_schema_documents_report(
        [document("http://a/one"), load("bad_version.json"), missing_id, document("http://a/two")], "Module", config
    )

    assert list(report.schemas) == ["http://a/one", "http://a/two"]
    assert [type(error) for error in report.errors] == [UnsupportedVersionError, MissingIdentifierError]
    assert not report.ok


def nested_arrays(depth):
    node = {"type": "string"}
    for _ in range(depth):
        node = {"type": "array", "items": node}
    return node


def test_too_deep_document_is_skipped():
    deep = {"$schema": DRAFT_04_SCHEMA, "id": "http://a/deep", **nested_arrays(ParserConfig().max_depth + 50)}
    config = ParserConfig(skip_invalid_documents=True)

    report = parse_schema_documents_report([json.loads(json.dumps(deep)), document("http://a/two")], "Module", config)

    assert list(report.schemas) == ["http://a/two"]
    assert [type(error) for error in report.errors] == [RecursionDepthError]


def test_skip_invalid_documents_still_aborts_on_id_collision():
    config = ParserConfig(skip_invalid_documents=True)
    with pytest.raises(IdCollisionError):
        parse_schema_documents([document("http://a/one"), document("http://a/one")], "Module", config)


def test_report_collects_dispatch_failures():
    report = parse_schema_documents_report([load("unresolvable.json"), load("link.json")], "Module")
    assert list(report.dispatch_failures) == ["http://example.com/unresolvable.json"]
    assert report.errors == []
    assert not report.ok


def test_report_ok():
    report = parse_schema_documents_report([load("link.json")], "Module")
    assert report.ok


def test_merge_schemas():
    one = parse_schema(document("http://a/one"), "M")
    target = merge_schemas({}, one)
    assert list(target) == ["http://a/one"]
    with pytest.raises(IdCollisionError):
        merge_schemas(target, one)


def test_parse_schema_files():
    schema_dict = parse_schema_files([TEST_DATA / "circle.json", TEST_DATA / "definitions.json"], "Shapes")
    assert set(schema_dict) == {"http://example.com/circle.json", "http://example.com/definitions.json"}

    circle = schema_dict["http://example.com/circle.json"]
    center = circle.types["#/properties/center"]
    assert center.target_uri == "http://example.com/definitions.json"
    assert str(center.target_path) == "#/definitions/point"
    assert circle.types["#"].required == ("center", "radius")
