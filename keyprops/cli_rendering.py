"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and loaded property listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConfigError
from .store import PropertyStore

_CONTINUATION_INDENT = "    "


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConfigError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_value(value: str) -> str:
    """Indent continuation lines of a multi-line value."""

    return value.replace("\n", "\n" + _CONTINUATION_INDENT)


def echo_properties(store: PropertyStore) -> None:
    """Print `NAME = value` rows for every declared key, sorted by name."""

    for name in sorted(store.registry.names()):
        typer.echo(f"{name} = {format_value(store.get(name))}")
