"""Directory scanning: ignore filter plus per-child metadata capture."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from ..errors import DirectoryReadError

logger = logging.getLogger(__name__)

INDEX_JSON = "index.json"
INDEX_HTML = "index.html"
LISTING_FILENAMES = frozenset({INDEX_JSON, INDEX_HTML})


@dataclass(frozen=True)
class DirectoryChild:
    """One non-ignored directory child plus the metadata read during the scan.

    ``is_dir`` is true only for real directories, which are descended into.
    ``target_is_dir`` follows symlinks and decides how the row is displayed.
    """

    name: str
    path: Path
    is_dir: bool
    target_is_dir: bool
    file_size: int | None
    mtime: datetime


def should_ignore(name: str, vendor_dir: str, skip_hidden: bool = False) -> bool:
    """Return whether a child named ``name`` is left out of listings.

    The vendor asset directory and the tool's own ``index.html`` /
    ``index.json`` output are always ignored. Matching is by literal name, so a
    user file called ``index.html`` is treated as output and overwritten.
    """
    if name == vendor_dir or name in LISTING_FILENAMES:
        return True
    return skip_hidden and name.startswith(".")


def list_directory_children(
    directory: Path,
    vendor_dir: str,
    skip_hidden: bool = False,
) -> list[DirectoryChild]:
    """Scan ``directory`` once and return its non-ignored children.

    Children whose metadata cannot be read are skipped. Failure to open or
    enumerate ``directory`` itself raises ``DirectoryReadError``.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if should_ignore(name, vendor_dir, skip_hidden):
                    continue

                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                    child_stat = child.stat()
                except OSError as exc:
                    logger.debug("Skipping %s: %s", child.path, exc)
                    continue
                target_is_dir = stat.S_ISDIR(child_stat.st_mode)

                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        target_is_dir=target_is_dir,
                        file_size=None if target_is_dir else int(child_stat.st_size),
                        mtime=datetime.fromtimestamp(child_stat.st_mtime, tz=timezone.utc),
                    )
                )
    except OSError as exc:
        raise DirectoryReadError(f"Cannot read directory {directory}: {exc}", directory) from exc
    return children


__all__ = [
    "INDEX_JSON",
    "INDEX_HTML",
    "LISTING_FILENAMES",
    "DirectoryChild",
    "should_ignore",
    "list_directory_children",
]
