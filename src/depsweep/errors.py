"""Error taxonomy for scanning and cleaning."""

from __future__ import annotations

from pathlib import Path


class DepsweepError(Exception):
    """Base class for all depsweep errors."""


class PathError(DepsweepError):
    """Raised when the scan root cannot be used. Fatal to the invocation."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(PathError):
    """The scan root does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path {str(path)!r} does not exist.")


class NotADirectoryPathError(PathError):
    """The scan root exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"{str(path)!r} is not a directory.")


class ListingError(DepsweepError):
    """A subdirectory could not be enumerated. Local to that subtree."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot list {path}: {cause}")
        self.path = path
        self.cause = cause


class DeletionError(DepsweepError):
    """A matched directory could not be removed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause
