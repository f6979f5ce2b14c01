"""Error kinds reported by vipergen.

Only :class:`IdentityLookupFailure` is recoverable; the generator substitutes
the fallback author and carries on.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure the generator reports."""

    kind = "scaffold"


class UsageError(ScaffoldError):
    """A required command-line argument is missing."""

    kind = "usage"


class IdentityLookupFailure(ScaffoldError):
    """The author name could not be read from git. Never fatal."""

    kind = "identity"


class DirectoryCreationFailure(ScaffoldError):
    """The module directory could not be created."""

    kind = "directory"

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class FileWriteFailure(ScaffoldError):
    """A rendered file could not be written."""

    kind = "write"

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)
