"""Core minigrep data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LineView:
    """One line of a text blob, stored as a half-open offset range.

    The view keeps a reference to ``source`` instead of a copy of the line;
    ``text`` slices it out on demand.
    """

    source: str = field(repr=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start
