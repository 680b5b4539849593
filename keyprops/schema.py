"""YAML key-schema files.

A schema file declares the keys a property file may use, either under a
top-level `keys` mapping or as the top-level mapping itself:

    keys:
      HOME:
        mandatory: true
      BIN_DIR:
        default: ${HOME}/bin
      LOG_LEVEL:

An empty entry declares an optional key without default.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import SchemaFileInvalid
from .keys import KeyDescriptor, KeyRegistry
from .parsing import normalize_optional_string, parse_permissive_boolean

_SUPPORTED_ENTRY_FIELDS = frozenset({"mandatory", "default"})


def load_key_schema(path: Path) -> KeyRegistry:
    """Read a YAML schema file into a `KeyRegistry`.

    Raises:
        SchemaFileInvalid: If the file is missing, is not valid YAML or has
            entries with unsupported shapes.
        EmptySchema: If the file declares no keys.
    """

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaFileInvalid(
            f"Schema file `{path}` cannot be read: {exc.strerror or exc}.",
            hint="Provide an existing schema via `--schema <path.yaml>`.",
        ) from exc

    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise SchemaFileInvalid(f"Schema file `{path}` is not valid YAML: {exc}") from exc

    return parse_key_schema(payload, source_label=f"Schema `{path}`")


def parse_key_schema(payload: Any, source_label: str = "Schema") -> KeyRegistry:
    """Build a registry from a decoded YAML payload."""

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise SchemaFileInvalid(f"{source_label} must contain a top-level mapping/object.")
    if "keys" in payload and isinstance(payload["keys"], Mapping):
        extra = sorted(str(key) for key in payload if key != "keys")
        if extra:
            raise SchemaFileInvalid(
                f"{source_label} includes unsupported key(s): {', '.join(extra)}."
            )
        payload = payload["keys"]

    return KeyRegistry(
        _descriptor_from_entry(raw_name, entry, source_label)
        for raw_name, entry in payload.items()
    )


def _descriptor_from_entry(raw_name: Any, entry: Any, source_label: str) -> KeyDescriptor:
    """Read one `NAME: {mandatory, default}` entry."""

    name = normalize_optional_string(raw_name)
    if name is None:
        raise SchemaFileInvalid(f"{source_label} contains a blank key name.")
    if entry is None:
        return KeyDescriptor(name)
    if not isinstance(entry, Mapping):
        raise SchemaFileInvalid(f"{source_label} key `{name}` must be a mapping/object.")

    unknown = sorted(str(field) for field in set(entry).difference(_SUPPORTED_ENTRY_FIELDS))
    if unknown:
        raise SchemaFileInvalid(
            f"{source_label} key `{name}` includes unsupported field(s): {', '.join(unknown)}."
        )

    mandatory = False
    if "mandatory" in entry:
        parsed = parse_permissive_boolean(entry["mandatory"])
        if parsed is None:
            raise SchemaFileInvalid(
                f"{source_label} key `{name}` field `mandatory` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        mandatory = parsed

    return KeyDescriptor(name, mandatory=mandatory, default_value=_default_text(entry.get("default")))


def _default_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list)):
        raise SchemaFileInvalid("Schema field `default` must be a scalar value.")
    return str(value)
