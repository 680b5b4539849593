"""Resolved property values with typed getters.

Responsibilities:
- Hold one value per `KeyDescriptor` of a registry.
- Validate mandatory keys and run the substitution pass during a load.
- Convert stored text to typed values for callers.

A store is populated and resolved by `PropertiesLoader` and is read-only once
the load returns, so it can be shared across threads without locking.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from loguru import logger

from .errors import InvalidConfigValue, MissingMandatoryKey
from .keys import KeyDescriptor, KeyRef, KeyRegistry, key_name
from .parsing import (
    element_converter,
    parse_bounded_integer,
    parse_char,
    parse_float,
    parse_lenient_boolean,
    split_delimited,
)
from .substitution import SubstitutionEngine

T = TypeVar("T")


class PropertyStore:
    """Property values keyed by descriptor for one loaded file."""

    def __init__(
        self, registry: KeyRegistry, engine: SubstitutionEngine | None = None
    ) -> None:
        self._registry = registry
        self._engine = engine or SubstitutionEngine()
        self._values: dict[KeyDescriptor, str] = {}

    @property
    def registry(self) -> KeyRegistry:
        return self._registry

    def put(self, descriptor: KeyDescriptor, value: str) -> None:
        """Store `value` for `descriptor`, replacing any earlier value."""

        logger.debug("Updating key `{}`", descriptor.name)
        self._values[descriptor] = value

    def validate_mandatory(self, registry: KeyRegistry | None = None) -> None:
        """Raise `MissingMandatoryKey` for the first mandatory key without a value."""

        for descriptor in (registry or self._registry).mandatory():
            if descriptor not in self._values:
                raise MissingMandatoryKey(descriptor.name)

    def resolve_all(self) -> None:
        """Replace every stored value by its fully substituted form."""

        for descriptor in list(self._values):
            self._values[descriptor] = self._engine.resolve(
                self._values[descriptor], self._stored_value, origin=descriptor.name
            )

    def _stored_value(self, name: str) -> str | None:
        descriptor = self._registry.find(name)
        if descriptor is None:
            return None
        return self._values.get(descriptor)

    def get(self, key: KeyRef) -> str:
        """Return the stored value, or the resolved default when none is stored.

        Raises:
            UnknownKey: If `key` is not declared in the registry.
        """

        descriptor = self._registry.require(key)
        value = self._values.get(descriptor)
        if not value:
            value = self._engine.resolve(descriptor.default_value, self._stored_value)
        return value

    def _convert(self, key: KeyRef, expected: str, converter: Callable[[str], T]) -> T:
        value = self.get(key)
        try:
            return converter(value)
        except ValueError as exc:
            raise InvalidConfigValue(self._registry.require(key).name, value, expected) from exc

    def get_byte(self, key: KeyRef) -> int:
        return self._convert(key, "byte", lambda value: parse_bounded_integer(value, "byte"))

    def get_short(self, key: KeyRef) -> int:
        return self._convert(key, "short", lambda value: parse_bounded_integer(value, "short"))

    def get_int(self, key: KeyRef) -> int:
        """Return the value as a 32-bit signed integer."""

        return self._convert(key, "int", lambda value: parse_bounded_integer(value, "int"))

    def get_long(self, key: KeyRef) -> int:
        return self._convert(key, "long", lambda value: parse_bounded_integer(value, "long"))

    def get_float(self, key: KeyRef) -> float:
        return self._convert(key, "float", parse_float)

    def get_double(self, key: KeyRef) -> float:
        return self._convert(key, "double", parse_float)

    def get_char(self, key: KeyRef) -> str:
        return self._convert(key, "char", parse_char)

    def get_boolean(self, key: KeyRef) -> bool:
        """Return `True` for `true` in any case, `False` for any other non-empty value."""

        return self._convert(key, "boolean", parse_lenient_boolean)

    def get_list(
        self,
        key: KeyRef,
        element_type: type[T] | Callable[[str], T] = str,
        delimiter: str = ",",
    ) -> list[T]:
        """Split the value on a literal delimiter and convert every non-blank field.

        Args:
            key: Key to read.
            element_type: `str`, `int`, `float`, `bool` or a converter callable.
            delimiter: Literal separator; regex meta-characters need no escaping.

        Raises:
            InvalidConfigValue: If any field cannot be converted.
        """

        converter = element_converter(element_type)
        value = self.get(key)
        expected = f"list of {getattr(element_type, '__name__', 'values')}"
        converted: list[T] = []
        for field in split_delimited(value, delimiter):
            try:
                converted.append(converter(field))
            except ValueError as exc:
                raise InvalidConfigValue(
                    self._registry.require(key).name, value, expected
                ) from exc
        return converted

    def as_dict(self) -> dict[str, str]:
        """Return stored values keyed by name."""

        return {descriptor.name: value for descriptor, value in self._values.items()}

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (KeyDescriptor, str, Enum)):
            return False
        return self._stored_value(key_name(key)) is not None

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertyStore({len(self._values)} key(s))"
