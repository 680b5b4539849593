"""Recursive `${NAME}` / `$NAME` variable substitution.

Responsibilities:
- Find variable references in a value.
- Resolve each referenced key's stored value with the same algorithm, so
  references chain transitively down to plain text.
- Detect reference cycles instead of recursing without bound.

Names are at least two characters long: `$a` is left untouched.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from loguru import logger

from .errors import CyclicReference

_NAME = r"[a-zA-Z_.][a-zA-Z_.0-9]+"
REFERENCE_PATTERN = re.compile(r"\$\{\s*(" + _NAME + r")\s*\}|\$(" + _NAME + r")")

ValueLookup = Callable[[str], "str | None"]


def _reference_pattern_for(name: str) -> re.Pattern[str]:
    """Return a pattern matching both spellings of one reference."""

    escaped = re.escape(name)
    return re.compile(r"\$\{\s*" + escaped + r"\s*\}|\$" + escaped + r"(?![a-zA-Z_.0-9])")


def find_references(value: str) -> list[str]:
    """Return referenced names in order of first appearance."""

    names: list[str] = []
    for match in REFERENCE_PATTERN.finditer(value):
        name = match.group(1) or match.group(2)
        if name not in names:
            names.append(name)
    return names


class SubstitutionEngine:
    """Resolve variable references against a name → stored value lookup.

    The lookup returns the current stored text of a key (raw or already
    resolved) or `None` when the key has no stored value; unresolvable
    references become empty strings.
    """

    def resolve(self, value: str, lookup: ValueLookup, origin: str | None = None) -> str:
        """Return `value` with every reference replaced by its resolved text.

        Args:
            value: Text to resolve.
            lookup: Stored value of a key name, or `None`.
            origin: Name of the key `value` belongs to, if any.

        Raises:
            CyclicReference: If resolving `value` re-enters a key already being resolved.
        """

        return self._resolve(value, lookup, (origin,) if origin else ())

    def _resolve(self, value: str, lookup: ValueLookup, chain: tuple[str, ...]) -> str:
        result = value
        for name in find_references(value):
            if name in chain:
                raise CyclicReference(chain[chain.index(name):] + (name,))

            stored = lookup(name)
            replacement = "" if stored is None else self._resolve(stored, lookup, chain + (name,))
            logger.trace("Replacing reference `{}` with `{}`", name, replacement)
            result = _reference_pattern_for(name).sub(lambda _: replacement, result)
        return result
