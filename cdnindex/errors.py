"""Fatal error kinds raised while provisioning assets or writing listings.

Per-child metadata failures are not represented here: the scanner skips those
children instead of raising.
"""

from __future__ import annotations

from pathlib import Path


class IndexingError(Exception):
    """Base class for failures that abort an indexing run."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class AssetProvisionError(IndexingError):
    """Vendor directory could not be removed, recreated, or populated."""


class DirectoryReadError(IndexingError):
    """A directory could not be opened or enumerated."""


class ListingWriteError(IndexingError):
    """An ``index.json`` or ``index.html`` file could not be replaced."""


__all__ = [
    "IndexingError",
    "AssetProvisionError",
    "DirectoryReadError",
    "ListingWriteError",
]
