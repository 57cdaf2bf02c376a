"""Text helpers for splitting a blob into line views."""

from __future__ import annotations

from typing import Iterator

from minigrep.models import LineView


def iter_line_views(contents: str) -> Iterator[LineView]:
    """Yield a view for every line of ``contents`` in order.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped. A final line
    without a terminator is still yielded, but a trailing terminator does not
    produce an extra empty line.
    """
    start = 0
    length = len(contents)
    while start < length:
        newline = contents.find("\n", start)
        if newline == -1:
            yield LineView(contents, start, length)
            return
        end = newline
        if end > start and contents[end - 1] == "\r":
            end -= 1
        yield LineView(contents, start, end)
        start = newline + 1
