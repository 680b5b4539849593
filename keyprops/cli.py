"""Command-line interface for keyprops.

Responsibilities:
- Load a property file against a YAML key schema.
- Print resolved values or a validation summary.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from .cli_rendering import echo_properties, exit_with_command_error, format_value
from .loader import PropertiesLoader
from .schema import load_key_schema
from .store import PropertyStore
from .telemetry.logger import LoadLogger

app = typer.Typer(
    name="keyprops",
    no_args_is_help=True,
    help="Load and inspect key/value property files.",
)

ConfigArgument = Annotated[
    Path,
    typer.Argument(help="Path to the `key = value` property file."),
]
SchemaOption = Annotated[
    Path,
    typer.Option("--schema", help="Path to the YAML key schema."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Print load phase logs on stderr."),
]


@contextmanager
def _phase_logging(verbose: bool) -> Iterator[LoadLogger]:
    """Yield a load logger, routed to stderr only for the duration of a verbose command."""

    if not verbose:
        yield LoadLogger()
        return

    logger.enable("keyprops")
    try:
        yield LoadLogger(sink=sys.stderr)
    finally:
        logger.remove()
        logger.disable("keyprops")


def _load(config: Path, schema: Path, run_logger: LoadLogger) -> PropertyStore:
    registry = load_key_schema(schema)
    return PropertiesLoader(config, registry, run_logger=run_logger).load()


@app.command("show")
def show_command(
    config: ConfigArgument,
    schema: SchemaOption,
    key: Annotated[
        str | None,
        typer.Option("--key", help="Print only the resolved value of this key."),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print resolved values of every declared key, or of one key."""

    with _phase_logging(verbose) as run_logger:
        try:
            store = _load(config, schema, run_logger)
            value = store.get(key) if key is not None else None
        except Exception as exc:
            exit_with_command_error("show", exc)

    if value is not None:
        typer.echo(format_value(value))
        return
    echo_properties(store)


@app.command("check")
def check_command(
    config: ConfigArgument,
    schema: SchemaOption,
    verbose: VerboseOption = False,
) -> None:
    """Validate a property file against a schema without printing values."""

    with _phase_logging(verbose) as run_logger:
        try:
            store = _load(config, schema, run_logger)
        except Exception as exc:
            exit_with_command_error("check", exc)

    typer.echo(f"OK: {len(store)} key(s) loaded from `{config}`.")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
