"""Read the input file, filter it and print the matching lines."""

from __future__ import annotations

from functools import partial
from typing import Callable, List

import typer

from minigrep.config import SearchConfig
from minigrep.models import LineView
from minigrep.search import Searcher
from minigrep.utils.files import read_text

# color=True stops click from stripping ANSI escapes when stdout is not a tty.
echo_verbatim = partial(typer.echo, color=True)


def run(
    config: SearchConfig, *, echo: Callable[[str], object] = echo_verbatim
) -> List[LineView]:
    """Print every line of ``config.file_path`` matching ``config.query``.

    Raises ``FileReadError`` before anything is printed when the file cannot
    be read. Returns the matched lines; an empty result is not an error.
    """
    contents = read_text(config.file_path)
    results = Searcher.from_config(config).search(config.query, contents)
    for line in results:
        echo(line.text)
    return results
