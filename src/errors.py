"""Exception types shared by the metadata, versioning and project modules."""

from __future__ import annotations

from typing import Optional


class SpringCliError(Exception):
    """Base class for all errors raised by spring-cli."""


class FetchError(SpringCliError):
    """The metadata endpoint could not be reached or returned an empty body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedMetadata(SpringCliError):
    """A metadata payload was received but does not have the expected shape."""


class InvalidDependencies(SpringCliError):
    """A dependency list contains characters outside the allowed set."""


class GenerationError(SpringCliError):
    """Project generation or archive extraction failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, hints: Optional[list] = None):
        super().__init__(message)
        self.status_code = status_code
        self.hints = list(hints or [])


class BackupError(SpringCliError):
    """A file or directory could not be backed up."""
