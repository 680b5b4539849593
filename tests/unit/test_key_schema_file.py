"""Unit tests for YAML key-schema files."""

from __future__ import annotations

from pathlib import Path

import pytest

from keyprops.errors import EmptySchema, SchemaFileInvalid
from keyprops.keys import KeyRegistry
from keyprops.schema import load_key_schema, parse_key_schema
from tests.fixture_paths import fixture_path
from tests.key_schemas import DottedKeys


def test_load_key_schema_matches_equivalent_enum_schema() -> None:
    """A YAML schema and an enum schema with the same declarations should agree."""

    from_yaml = load_key_schema(fixture_path("dotted.schema.yml"))
    from_enum = KeyRegistry.from_schema(DottedKeys)

    assert from_yaml.names() == from_enum.names()
    for descriptor in from_enum:
        loaded = from_yaml.require(descriptor.name)
        assert loaded.mandatory == descriptor.mandatory
        assert loaded.default_value == descriptor.default_value


def test_load_key_schema_accepts_bare_mapping_and_null_entries() -> None:
    registry = load_key_schema(fixture_path("chained.schema.yml"))

    assert registry.names() == ["HOME", "BIN_DIR", "DUMP_FILE", "CONF_DIR", "LOG_DIR"]
    assert registry.require("HOME").mandatory is True
    assert registry.require("BIN_DIR").default_value == ""
    assert registry.require("LOG_DIR").default_value == "$HOME/logs"


def test_parse_key_schema_normalizes_scalar_defaults() -> None:
    registry = parse_key_schema(
        {"keys": {"PORT": {"default": 8080}, "DEBUG": {"default": False, "mandatory": "yes"}}}
    )

    assert registry.require("PORT").default_value == "8080"
    assert registry.require("DEBUG").default_value == "false"
    assert registry.require("DEBUG").mandatory is True


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        (["HOME"], "top-level mapping"),
        ({"HOME": "text"}, "must be a mapping"),
        ({"HOME": {"required": True}}, r"unsupported field\(s\): required"),
        ({"HOME": {"mandatory": "maybe"}}, "must be a boolean"),
        ({"HOME": {"default": [1, 2]}}, "scalar"),
        ({"keys": {"HOME": None}, "version": 2}, r"unsupported key\(s\): version"),
        ({" ": None}, "blank key name"),
    ],
)
def test_parse_key_schema_rejects_invalid_payloads(payload: object, message: str) -> None:
    with pytest.raises(SchemaFileInvalid, match=message):
        parse_key_schema(payload)


def test_parse_key_schema_rejects_empty_schema() -> None:
    with pytest.raises(EmptySchema):
        parse_key_schema(None)


def test_load_key_schema_reports_missing_and_invalid_files(tmp_path: Path) -> None:
    with pytest.raises(SchemaFileInvalid, match="cannot be read"):
        load_key_schema(tmp_path / "missing.yml")

    broken = tmp_path / "broken.yml"
    broken.write_text("keys: [unclosed\n", encoding="utf-8")
    with pytest.raises(SchemaFileInvalid, match="not valid YAML"):
        load_key_schema(broken)
