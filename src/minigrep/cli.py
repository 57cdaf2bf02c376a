"""Command line interface for minigrep."""

from __future__ import annotations

import logging
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from minigrep.config import SearchConfig, verbose_from_env
from minigrep.errors import ConfigError, MinigrepError
from minigrep.runner import run

LOGGER = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False)
app = typer.Typer(
    help="minigrep - print the lines of a file that contain a query",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(prefix: str, exc: MinigrepError) -> NoReturn:
    LOGGER.debug("%s", prefix, exc_info=exc)
    err_console.print(f"[red]{prefix}:[/red] {escape(str(exc))}", soft_wrap=True)
    raise typer.Exit(code=1)


# Every word after the program name is positional, including ones that look
# like options, so queries such as "-v" or "--help" are searched for.
@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def main(
    args: Optional[List[str]] = typer.Argument(None, metavar="QUERY FILE_PATH", show_default=False),
) -> None:
    """Print every line of FILE_PATH containing QUERY.

    Set IGNORE_CASE (or CASE_INSENSITIVE) to any value to ignore case, and
    MINIGREP_LOG=debug for debug logging on stderr.
    """
    _setup_logging(verbose_from_env())

    try:
        config = SearchConfig.build(["minigrep", *(args or [])])
    except ConfigError as exc:
        _fail("Problem parsing arguments", exc)

    try:
        run(config)
    except MinigrepError as exc:
        _fail("Application error", exc)
