"""Domain datatypes for per-directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

DIRECTORY_SIZE_LABEL = "directory"


@dataclass(frozen=True)
class Entry:
    """One file or subdirectory row of a listing."""

    name: str
    path: str
    icon: str
    date: datetime
    size: str
    is_dir: bool = False

    def to_json(self) -> dict[str, str]:
        """Serialized form for ``index.json``; ``path`` and ``icon`` are display-only."""
        return {
            "name": self.name,
            "date": self.date.isoformat(),
            "size": self.size,
        }


@dataclass(frozen=True)
class Breadcrumb:
    """One segment of the navigation trail shown above a listing."""

    name: str
    path: str


@dataclass(frozen=True)
class Listing:
    """Snapshot of one directory taken during a single scan pass.

    ``directories`` are sorted by name, ``files`` newest first. Both output
    files of a directory are written from the same instance.
    """

    directory: Path
    breadcrumbs: tuple[Breadcrumb, ...]
    directories: tuple[Entry, ...]
    files: tuple[Entry, ...]

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Display order: directories first, then files."""
        return self.directories + self.files

    def to_json(self) -> dict[str, list[dict[str, str]]]:
        """Document written to ``index.json``: files only, in sorted order."""
        return {"entries": [entry.to_json() for entry in self.files]}


__all__ = [
    "DIRECTORY_SIZE_LABEL",
    "Entry",
    "Breadcrumb",
    "Listing",
]
