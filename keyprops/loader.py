"""Load a property file against a key schema.

Key types:
- `PropertiesLoader`: one-shot orchestration of schema → read → validate →
  substitute for a single file.
- `load`: convenience wrapper returning the populated `PropertyStore`.

A load is all-or-nothing: the first error aborts it and no partially
populated store is returned.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .errors import ConfigError, ConfigFileUnavailable
from .keys import KeyRegistry, KeySchema
from .parser import LineParser
from .store import PropertyStore
from .substitution import SubstitutionEngine
from .telemetry.logger import LoadLogger

T = TypeVar("T")


class PropertiesLoader:
    """Read one UTF-8 property file into a validated, fully substituted store."""

    def __init__(
        self,
        path: str | Path,
        schema: KeySchema,
        *,
        run_logger: LoadLogger | None = None,
        engine: SubstitutionEngine | None = None,
    ) -> None:
        self.path = Path(path)
        self._schema = schema
        self._run_logger = run_logger or LoadLogger()
        self._engine = engine or SubstitutionEngine()

    def load(self) -> PropertyStore:
        """Run the load pipeline and return the resolved store.

        Raises:
            EmptySchema: If the schema declares no keys.
            ConfigFileUnavailable: If the file cannot be opened or decoded.
            MalformedLine: If a `key=value` line has the wrong shape.
            UnknownKey: If the file uses an undeclared key.
            MissingMandatoryKey: If a mandatory key is absent.
            CyclicReference: If variable references form a cycle.
        """

        registry = self._run_stage("schema", lambda: KeyRegistry.from_schema(self._schema))
        store = self._run_stage("read", lambda: self._read(registry), path=self.path)
        self._run_stage("validate", lambda: store.validate_mandatory(registry))
        self._run_stage("substitute", store.resolve_all, keys=len(store))
        return store

    def _run_stage(self, stage: str, action: Callable[[], T], **context: object) -> T:
        self._run_logger.log_stage_start(stage, **context)
        try:
            result = action()
        except ConfigError as exc:
            self._run_logger.log_stage_failure(stage, type(exc).__name__)
            raise
        self._run_logger.log_stage_complete(stage)
        return result

    def _read(self, registry: KeyRegistry) -> PropertyStore:
        store = PropertyStore(registry, self._engine)
        parser = LineParser(registry)
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                parser.parse(handle, store)
        except FileNotFoundError as exc:
            raise ConfigFileUnavailable(
                f"Config file not found: `{self.path}`.",
                hint="Provide an existing property file path.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise ConfigFileUnavailable(
                f"Config file `{self.path}` is not valid UTF-8: {exc.reason}.",
            ) from exc
        except OSError as exc:
            raise ConfigFileUnavailable(
                f"Cannot read config file `{self.path}`: {exc.strerror or exc}.",
                hint="Verify file permissions.",
            ) from exc
        return store


def load(
    path: str | Path,
    schema: KeySchema,
    *,
    run_logger: LoadLogger | None = None,
) -> PropertyStore:
    """Load `path` against `schema` and return the resolved store."""

    return PropertiesLoader(path, schema, run_logger=run_logger).load()
