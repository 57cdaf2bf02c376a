"""Utility helpers for working with files."""

from __future__ import annotations

import logging
from pathlib import Path

from minigrep.errors import FileReadError

LOGGER = logging.getLogger(__name__)


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read the whole file as text, wrapping any failure in FileReadError.

    Line endings are returned untranslated.
    """
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            contents = handle.read()
    except UnicodeDecodeError as exc:
        raise FileReadError(path, f"not valid {encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc
    LOGGER.debug("Read %d characters from %s", len(contents), path)
    return contents
