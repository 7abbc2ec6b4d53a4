"""Exception types raised by sunrise."""

from __future__ import annotations

from pathlib import Path


class SunriseError(Exception):
    """Base class for every error the CLI reports to the user."""


class StoreIOError(SunriseError):
    """Reading, writing or creating a store file failed."""

    def __init__(self, path: Path, operation: str, cause: OSError) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"could not {operation} {path}: {cause.strerror or cause}")
        self.__cause__ = cause


class StoreFormatError(SunriseError):
    """A store file could not be decoded."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{reason}")


class StoreEncodeError(SunriseError):
    """Descriptions could not be serialized."""


class StoreNotFoundError(SunriseError):
    """No store file exists in the start directory or any ancestor."""

    def __init__(self, start: Path, filename: str) -> None:
        self.start = start
        super().__init__(f"{filename} not found in {start} or any parent directory")


class PathError(SunriseError):
    """A path cannot be used as a store key."""


class MissingPathError(PathError):
    """The path does not exist (or does not canonicalize)."""


class UnrelatedPathError(PathError):
    """The path cannot be expressed relative to the store root."""


class InputParseError(SunriseError):
    """A prompt answer was not understood."""
