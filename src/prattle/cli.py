"""
prattle command line interface.

    prattle parse FILE            print the expression tree parsed from FILE
    prattle parse --expr "1+2"    parse text given on the command line
    prattle tokens FILE           print one token per line
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from prattle._version import get_version
from prattle.core.environment import OutputFormat, get_log_level, get_output_format
from prattle.core.errors import PrattleError
from prattle.core.expressions import to_dict
from prattle.core.parser import Parser
from prattle.core.tokenizer import tokenize

app = typer.Typer(
    help="Pratt-parsing front end for arithmetic expressions.",
    no_args_is_help=True,
)

err_console = Console(stderr=True)
logger = logging.getLogger("prattle.cli")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"prattle version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides PRATTLE_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any command runs."""
    level = get_log_level(log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("prattle").setLevel(level)


def _read_source(file: Path | None, expr: str | None) -> str:
    if (file is None) == (expr is None):
        err_console.print("[red]Invalid number of arguments[/red]")
        raise typer.Exit(code=1)
    if expr is not None:
        return expr
    assert file is not None
    try:
        return file.read_text(encoding="utf-8")
    except OSError as e:
        reason = escape(str(e.strerror or e))
        err_console.print(f"[red]Cannot read {escape(str(file))}: {reason}[/red]")
        raise typer.Exit(code=1) from e


def _fail(error: PrattleError) -> typer.Exit:
    logger.debug("Aborting on %s", type(error).__name__)
    err_console.print(f"[red]{type(error).__name__}: {escape(error.message)}[/red]")
    return typer.Exit(code=1)


@app.command(name="parse")
def parse_command(
    file: Path | None = typer.Argument(  # noqa: B008
        None,
        help="File containing the expression.",
        show_default=False,
    ),
    expr: str | None = typer.Option(
        None,
        "--expr",
        "-e",
        help="Expression text to parse instead of a file.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the tree as JSON (overrides PRATTLE_OUTPUT).",
    ),
) -> None:
    """Parse an expression and print its tree."""
    source = _read_source(file, expr)
    try:
        tree = Parser.from_source(source).parse()
    except PrattleError as e:
        raise _fail(e) from e

    fmt = get_output_format(OutputFormat.JSON if as_json else None)
    if fmt == OutputFormat.JSON:
        typer.echo(json.dumps(to_dict(tree), indent=2))
    else:
        typer.echo(tree.render())


@app.command(name="tokens")
def tokens_command(
    file: Path | None = typer.Argument(  # noqa: B008
        None,
        help="File containing the expression.",
        show_default=False,
    ),
    expr: str | None = typer.Option(
        None,
        "--expr",
        "-e",
        help="Expression text to tokenize instead of a file.",
    ),
) -> None:
    """Print the token stream, one token per line."""
    source = _read_source(file, expr)
    try:
        tokens = tokenize(source)
    except PrattleError as e:
        raise _fail(e) from e

    for tok in tokens:
        typer.echo(tok.debug_repr())


def main() -> None:
    """Entry point for the ``prattle`` console script."""
    app()


if __name__ == "__main__":
    main()
