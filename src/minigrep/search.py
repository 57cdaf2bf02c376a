"""Substring line filter."""

from __future__ import annotations

import logging
from typing import List

from minigrep.config import SearchConfig
from minigrep.models import LineView
from minigrep.utils.text import iter_line_views

LOGGER = logging.getLogger(__name__)


def search(query: str, contents: str) -> List[LineView]:
    """Return the lines of ``contents`` that contain ``query``, in order."""
    return [line for line in iter_line_views(contents) if query in line.text]


def search_case_insensitive(query: str, contents: str) -> List[LineView]:
    """Like :func:`search`, but compares lowercased query and lines."""
    lowered_query = query.lower()
    return [
        line for line in iter_line_views(contents) if lowered_query in line.text.lower()
    ]


class Searcher:
    """High-level API choosing the matching mode once."""

    def __init__(self, *, case_insensitive: bool = False) -> None:
        self.case_insensitive = case_insensitive

    @classmethod
    def from_config(cls, config: SearchConfig) -> "Searcher":
        return cls(case_insensitive=config.case_insensitive)

    def search(self, query: str, contents: str) -> List[LineView]:
        if self.case_insensitive:
            results = search_case_insensitive(query, contents)
        else:
            results = search(query, contents)
        LOGGER.debug(
            "Query %r matched %d line(s) (case_insensitive=%s)",
            query,
            len(results),
            self.case_insensitive,
        )
        return results
