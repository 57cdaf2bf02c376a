"""Exception hierarchy for minigrep."""

from __future__ import annotations

from pathlib import Path


class MinigrepError(RuntimeError):
    """Base class for all errors raised by minigrep."""


class ConfigError(MinigrepError):
    """Command line arguments could not be resolved into a config."""


class InsufficientArguments(ConfigError):
    """Fewer than the two required positional arguments were given."""

    default_message = "not enough arguments"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingQuery(InsufficientArguments):
    default_message = "Didn't get a query string"


class MissingFilePath(InsufficientArguments):
    default_message = "Didn't get a file path"


class FileReadError(MinigrepError):
    """The input file does not exist, is unreadable or is not valid text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason
