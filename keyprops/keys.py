"""Key descriptors and the registry of keys recognized by one schema.

Key types:
- `KeyDescriptor`: name, mandatory flag and default value of one key.
- `KeyRegistry`: immutable name index built once from a key schema.

A key schema is an iterable of `KeyDescriptor` (or bare key names), or an
`Enum` class whose members either carry a `KeyDescriptor` as their value or
contribute their member name as an optional key without default.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Union

from .errors import EmptySchema, UnknownKey


@dataclass(frozen=True, slots=True)
class KeyDescriptor:
    """One recognized configuration key.

    Attributes:
        name: Key name as written in the property file.
        mandatory: Whether the file must define the key.
        default_value: Value returned when the key has no stored value; empty
            string means no default. May contain variable references.
    """

    name: str
    mandatory: bool = field(default=False, compare=False)
    default_value: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("`name` must be a non-empty string.")


KeySchemaEntry = Union[KeyDescriptor, str, Enum]
KeyRef = Union[KeyDescriptor, str, Enum]


def descriptor_for(entry: KeySchemaEntry) -> KeyDescriptor:
    """Return the descriptor declared by one schema entry."""

    if isinstance(entry, KeyDescriptor):
        return entry
    if isinstance(entry, Enum):
        if isinstance(entry.value, KeyDescriptor):
            return entry.value
        return KeyDescriptor(entry.name)
    if isinstance(entry, str):
        return KeyDescriptor(entry)
    raise TypeError(f"Unsupported key schema entry: {entry!r}.")


def key_name(key: KeyRef) -> str:
    """Return the file-level key name referenced by a descriptor, enum member or name."""

    if isinstance(key, str) and not isinstance(key, Enum):
        return key
    return descriptor_for(key).name


class KeyRegistry:
    """Immutable name → descriptor index for one key schema."""

    __slots__ = ("_by_name",)

    def __init__(self, descriptors: Iterable[KeyDescriptor]) -> None:
        by_name: dict[str, KeyDescriptor] = {}
        for descriptor in descriptors:
            by_name[descriptor.name] = descriptor
        if not by_name:
            raise EmptySchema(
                "Key schema does not declare any key.",
                hint="Declare at least one key in the schema.",
            )
        self._by_name: Mapping[str, KeyDescriptor] = MappingProxyType(by_name)

    @classmethod
    def from_schema(cls, schema: KeySchema) -> KeyRegistry:
        """Build a registry from an enum class, descriptors, names or an existing registry."""

        if isinstance(schema, KeyRegistry):
            return schema
        if isinstance(schema, str):
            raise TypeError("A key schema must be an iterable of keys, not a single string.")
        return cls(descriptor_for(entry) for entry in schema)

    def find(self, name: str) -> KeyDescriptor | None:
        """Return the descriptor registered under `name`, or `None`."""

        return self._by_name.get(name)

    def require(self, key: KeyRef) -> KeyDescriptor:
        """Return the registered descriptor for a key reference or raise `UnknownKey`."""

        name = key_name(key)
        descriptor = self._by_name.get(name)
        if descriptor is None:
            raise UnknownKey(name)
        return descriptor

    def mandatory(self) -> list[KeyDescriptor]:
        """Return mandatory descriptors in declaration order."""

        return [descriptor for descriptor in self._by_name.values() if descriptor.mandatory]

    def names(self) -> list[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[KeyDescriptor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"KeyRegistry({', '.join(self._by_name)})"


KeySchema = Union[KeyRegistry, type[Enum], Iterable[KeySchemaEntry]]
