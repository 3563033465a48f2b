"""Exceptions raised while organizing a directory."""

from pathlib import Path


class OrganizerError(Exception):
    """Base class for organize failures."""


class ConfigError(OrganizerError):
    """The run options cannot be used (e.g. the source directory is missing)."""


class EnumerationError(OrganizerError, OSError):
    """The source directory could not be read."""


class MoveError(OrganizerError, OSError):
    """Creating a destination directory or renaming a file failed."""

    def __init__(self, message: str, source: Path, destination: Path):
        super().__init__(message)
        self.source = source
        self.destination = destination
