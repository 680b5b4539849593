"""Domain exceptions for property loading and CLI diagnostics.

Every failure is terminal for the load that raised it. Each error carries the
stage it was raised in so callers and the CLI can render uniform diagnostics.
"""

from __future__ import annotations


class ConfigError(RuntimeError):
    """Base error for schema, file, parsing, substitution and conversion failures."""

    stage = "config"

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        """Initialize a stage-scoped configuration error."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint


class EmptySchema(ConfigError):
    """Raised when a key schema declares no keys."""

    stage = "schema"


class SchemaFileInvalid(ConfigError):
    """Raised when a YAML key-schema file cannot be turned into descriptors."""

    stage = "schema"


class ConfigFileUnavailable(ConfigError):
    """Raised when the property file is missing, unreadable or not valid UTF-8."""

    stage = "read"


class MalformedLine(ConfigError):
    """Raised when a `key=value` line does not split into exactly one key and value."""

    stage = "read"

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"Invalid line {line_number}: `{line}`.",
            hint="Use exactly one `=` per entry and a non-empty key.",
        )
        self.line_number = line_number
        self.line = line


class UnknownKey(ConfigError, LookupError):
    """Raised when a key is not declared in the key schema."""

    stage = "read"

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Unrecognized configuration key `{key}`.",
            hint="Declare the key in the schema or remove it from the file.",
        )
        self.key = key


class MissingMandatoryKey(ConfigError):
    """Raised when a mandatory key has no entry after parsing."""

    stage = "validate"

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing mandatory configuration key `{key}`.")
        self.key = key


class CyclicReference(ConfigError):
    """Raised when variable references form a cycle."""

    stage = "substitute"

    def __init__(self, chain: tuple[str, ...]) -> None:
        rendered = " -> ".join(chain)
        super().__init__(
            f"Cyclic variable reference: {rendered}.",
            hint="Break the cycle so every reference ends at a plain value.",
        )
        self.chain = chain


class InvalidConfigValue(ConfigError, ValueError):
    """Raised when a stored value cannot be converted to the requested type."""

    stage = "convert"

    def __init__(self, key: str, value: str, expected: str) -> None:
        super().__init__(f"Value `{value}` of `{key}` is not a valid {expected}.")
        self.key = key
        self.value = value
        self.expected = expected
