"""Structured load logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level logs for property loads.
- Route every line through `loguru`, optionally onto a dedicated sink.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class LoadLogger:
    """Emit deterministic phase logs for one or more property loads."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize the logger, replacing loguru handlers when a sink is given."""

        self._sink = sink
        if sink is not None:
            logger.remove()
            logger.add(sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured load log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without value payloads."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
