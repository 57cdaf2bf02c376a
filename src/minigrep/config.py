"""Resolve a search configuration from program arguments and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from minigrep.errors import MissingFilePath, MissingQuery

LOGGER = logging.getLogger(__name__)

IGNORE_CASE_ENV = "IGNORE_CASE"
CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"
CASE_INSENSITIVE_ENV_VARS = (IGNORE_CASE_ENV, CASE_INSENSITIVE_ENV)
LOG_ENV = "MINIGREP_LOG"


def case_insensitive_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when any of the case-insensitivity variables is set.

    Only presence matters; an empty value still counts as set.
    """
    if environ is None:
        environ = os.environ
    return any(name in environ for name in CASE_INSENSITIVE_ENV_VARS)


def verbose_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when ``MINIGREP_LOG`` asks for debug logging."""
    if environ is None:
        environ = os.environ
    return environ.get(LOG_ENV, "").strip().lower() == "debug"


@dataclass(frozen=True, slots=True)
class SearchConfig:
    query: str
    file_path: Path
    case_insensitive: bool = False

    @classmethod
    def build(
        cls, args: Iterable[str], environ: Mapping[str, str] | None = None
    ) -> "SearchConfig":
        """Build a config from ``argv``-style arguments.

        The first element is the program name and is skipped. Raises
        ``MissingQuery`` or ``MissingFilePath`` (both ``InsufficientArguments``)
        when the positional arguments run out.
        """
        remaining = iter(args)
        next(remaining, None)

        query = next(remaining, None)
        if query is None:
            raise MissingQuery()

        file_path = next(remaining, None)
        if file_path is None:
            raise MissingFilePath()

        config = cls(
            query=query,
            file_path=Path(file_path),
            case_insensitive=case_insensitive_from_env(environ),
        )
        LOGGER.debug("Resolved %s", config)
        return config
