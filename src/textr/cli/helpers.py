"""CLI helper utilities shared across commands."""

from __future__ import annotations

import sys
from typing import Any, NoReturn, TypeVar

import click
from pydantic import BaseModel, ValidationError

from ..models.errors import ArgumentError

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def build_config(model: type[ConfigT], **values: Any) -> ConfigT:
    """Build a frozen config model, turning validation failures into ArgumentError.

    Args:
        model: Config model class
        **values: Field values collected from CLI options

    Returns:
        The validated config

    Raises:
        ArgumentError: Carrying the first validator message
    """
    try:
        return model(**values)
    except ValidationError as exc:
        raise ArgumentError(_first_message(exc)) from exc


def _first_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    # Errors raised inside our validators keep their own message
    error = first.get("ctx", {}).get("error")
    if error is not None:
        return str(error)
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]


def warn(error: Exception) -> None:
    """Report a non-fatal error as ``<program>: <error>`` on stderr."""
    ctx = click.get_current_context(silent=True)
    program = ctx.info_name if ctx and ctx.info_name else "textr"
    click.echo(f"{program}: {error}", err=True)


def fail(error: Exception) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def banner(name: str, index: int) -> str:
    """Return the ``==> name <==`` separator, with a blank line after the first file."""
    prefix = "\n" if index > 0 else ""
    return f"{prefix}==> {name} <=="
