"""Line-oriented `key = value` parser with multi-line values.

Rules, applied to each stripped physical line:
- blank lines and lines starting with `#` are ignored;
- a line without `=` continues the value of the pending key;
- a line with `=` must split into exactly one key and one value, and starts a
  new pending entry after the previous one has been stored.

Values are stored raw; variable substitution happens after parsing.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from .errors import MalformedLine
from .keys import KeyRegistry
from .store import PropertyStore

KEY_VALUE_SEPARATOR = "="
COMMENT_PREFIX = "#"


class LineParser:
    """Rebuild logical key/value entries from physical lines."""

    def __init__(self, registry: KeyRegistry) -> None:
        self._registry = registry
        self._pending_key: str | None = None
        self._pending_value: list[str] = []

    def parse(self, lines: Iterable[str], store: PropertyStore | None = None) -> PropertyStore:
        """Parse `lines` into a store of raw values.

        Args:
            lines: Physical lines, with or without trailing newlines.
            store: Store to populate; a new one is created when omitted.

        Raises:
            MalformedLine: If a `key=value` line has the wrong shape.
            UnknownKey: If a key is not declared in the registry.
        """

        target = store if store is not None else PropertyStore(self._registry)
        self._pending_key = None
        self._pending_value = []
        try:
            for line_number, raw_line in enumerate(lines, start=1):
                self._parse_line(line_number, raw_line.strip(), target)
            # The last entry has no following key to trigger its flush.
            self._flush(target)
        finally:
            self._pending_key = None
            self._pending_value = []
        return target

    def parse_text(self, text: str, store: PropertyStore | None = None) -> PropertyStore:
        return self.parse(text.splitlines(), store)

    def _parse_line(self, line_number: int, line: str, store: PropertyStore) -> None:
        if not line or line.startswith(COMMENT_PREFIX):
            logger.trace("Ignoring line {}", line_number)
            return

        if KEY_VALUE_SEPARATOR not in line:
            if self._pending_key is None:
                logger.debug("Dropping continuation line {} without a pending key", line_number)
                return
            self._pending_value.append("\n")
            self._pending_value.append(line)
            return

        fields = line.split(KEY_VALUE_SEPARATOR)
        if len(fields) != 2 or not fields[0].strip():
            raise MalformedLine(line_number, line)

        self._flush(store)
        self._pending_key = fields[0].strip()
        self._pending_value = [fields[1].strip()]

    def _flush(self, store: PropertyStore) -> None:
        if not self._pending_key:
            return
        descriptor = self._registry.require(self._pending_key)
        store.put(descriptor, "".join(self._pending_value))
