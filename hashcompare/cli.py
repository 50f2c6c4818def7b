# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

import logging
import logging.config
from typing import Optional

import typer

from hashcompare._logging import LogLevel, get_log_level, get_logging_config
from hashcompare._version import __version__
from hashcompare.config import Settings
from hashcompare.config.settings import (
    MAX_SCRYPT_MAX_MEMORY,
    MIN_SCRYPT_MAX_MEMORY,
)
from hashcompare.hashing import (
    HashCompareError,
    HashComparator,
    MismatchError,
    SchemeTag,
    UnknownSchemeError,
    classify,
)

APP_NAME = "hashcompare"
APP_HELP = "Verify passwords against stored hashes"

EXIT_MISMATCH = 1
EXIT_UNKNOWN_SCHEME = 3
EXIT_ERROR = 4

DEFAULT_SETTINGS = Settings.load()

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_short=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        default=LogLevel(get_log_level()),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Hashcompare command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    logging.config.dictConfig(get_logging_config(log_level.value))
    if ctx.invoked_subcommand is None:  # pragma: no cover
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command()
def verify(
    encoded_hash: str = typer.Argument(
        ...,
        help="The stored hash (quote it, it usually contains '$')",
    ),
    password: Optional[str] = typer.Option(
        None,
        "--password",
        "-p",
        help="The password to check (prompted for if not given)",
        show_default=False,
    ),
    scrypt_max_memory: int = typer.Option(
        default=DEFAULT_SETTINGS.scrypt_max_memory,
        min=MIN_SCRYPT_MAX_MEMORY,
        max=MAX_SCRYPT_MAX_MEMORY,
        help="Memory limit (bytes) for scrypt hashes",
    ),
) -> None:
    """Check a password against a stored hash."""
    logger = logging.getLogger(__name__)
    if password is None:
        password = typer.prompt("Password", hide_input=True)
    settings = Settings(
        log_level=DEFAULT_SETTINGS.log_level,
        scrypt_max_memory=scrypt_max_memory,
        max_workers=DEFAULT_SETTINGS.max_workers,
    )
    comparator = HashComparator.from_settings(settings)
    try:
        comparator.compare(password, encoded_hash)
    except MismatchError:
        typer.echo("mismatch")
        raise typer.Exit(code=EXIT_MISMATCH) from None
    except UnknownSchemeError as error:
        typer.echo(f"error ({error.kind.value}): {error}", err=True)
        raise typer.Exit(code=EXIT_UNKNOWN_SCHEME) from error
    except HashCompareError as error:
        logger.debug("Comparison failed", exc_info=True)
        typer.echo(f"error ({error.kind.value}): {error}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from error
    typer.echo("match")


@app.command()
def identify(
    encoded_hash: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Print the scheme of a stored hash."""
    tag = classify(encoded_hash)
    typer.echo(tag.value)
    if tag is SchemeTag.UNKNOWN:
        raise typer.Exit(code=EXIT_UNKNOWN_SCHEME)


if __name__ == "__main__":
    app()
