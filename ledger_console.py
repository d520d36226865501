"""Mini README: Entry point CLI for the groupledger console.

This script exposes a Typer CLI that feeds ledger commands to the
``CommandInterpreter``, either interactively from standard input or from a
command file. It configures logging from the environment-aware settings and
prints command output exactly as the interpreter renders it.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional

import typer

from groupledger.configuration import get_settings
from groupledger.interface import CommandInterpreter
from groupledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track group balances and transactions from the command line.")


def _build_interpreter(log_level: Optional[str]) -> CommandInterpreter:
    """Configure logging and return an interpreter over an empty registry."""

    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    try:
        configure_root_logger(level)
    except ValueError as error:
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level") from error
    return CommandInterpreter(settings=settings)


def _drive(
    interpreter: CommandInterpreter,
    lines: Iterable[str],
    *,
    strict: bool = False,
    echo: bool = False,
    prompt: str = "",
) -> int:
    """Execute lines in order; return the exit status for the session."""

    if prompt:
        typer.echo(prompt, nl=False)
    for line, result in interpreter.execute_many(lines):
        if echo and line.strip():
            typer.echo(f"{interpreter.settings.prompt}{line.strip()}")
        for output_line in result.output:
            typer.echo(output_line)
        if result.quit:
            break
        if strict and not result.ok:
            LOGGER.error("Stopping at failed command: %s", line.strip())
            return 1
        if prompt:
            typer.echo(prompt, nl=False)
    return 0


@cli.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start an interactive shell when no subcommand is given."""

    if ctx.invoked_subcommand is None:
        shell(log_level=None)


@cli.command()
def shell(
    log_level: Optional[str] = typer.Option(None, help="Logging level (defaults to settings)."),
) -> None:
    """Read commands from standard input until quit or end of input."""

    interpreter = _build_interpreter(log_level)
    prompt = interpreter.settings.prompt if sys.stdin.isatty() else ""
    _drive(interpreter, sys.stdin, prompt=prompt)


@cli.command()
def run(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="File with one command per line."
    ),
    strict: bool = typer.Option(False, help="Stop with exit status 1 at the first failing command."),
    echo: bool = typer.Option(False, help="Print each command before its output."),
    log_level: Optional[str] = typer.Option(None, help="Logging level (defaults to settings)."),
) -> None:
    """Execute the commands stored in a file."""

    interpreter = _build_interpreter(log_level)
    LOGGER.info("Running commands from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        status = _drive(interpreter, handle, strict=strict, echo=echo)
    if status:
        raise typer.Exit(code=status)


if __name__ == "__main__":
    cli()
