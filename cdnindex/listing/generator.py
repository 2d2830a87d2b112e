"""Depth-first generation of ``index.json`` and ``index.html`` for a tree.

Every directory is scanned exactly once. Its subdirectories are fully indexed
before its own two listing files are written, and both files are produced
from the same ``Listing`` snapshot. Traversal uses an explicit work stack so
tree depth is not bounded by the interpreter recursion limit.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..assets import VENDOR_DIR_NAME
from ..errors import ListingWriteError
from .fs import INDEX_HTML, INDEX_JSON, DirectoryChild, list_directory_children
from .icons import icon_for
from .paths import lossy_name, relative_web_path, to_breadcrumbs
from .render import ListingRenderer
from .sizes import format_size
from .types import DIRECTORY_SIZE_LABEL, Entry, Listing

logger = logging.getLogger(__name__)


def build_entry(child: DirectoryChild, root: Path) -> Entry:
    """Build the listing row for one scanned child.

    A symlink to a directory is displayed as a directory even though it is
    never descended into.
    """
    if child.target_is_dir or child.file_size is None:
        size = DIRECTORY_SIZE_LABEL
    else:
        size = format_size(child.file_size)
    return Entry(
        name=lossy_name(child.name),
        path=relative_web_path(child.path, root),
        icon=icon_for(child.path, child.target_is_dir),
        date=child.mtime,
        size=size,
        is_dir=child.target_is_dir,
    )


def sort_directories(entries: Iterable[Entry]) -> list[Entry]:
    """Directories by display name, ascending."""
    return sorted(entries, key=lambda entry: entry.name)


def sort_files(entries: Iterable[Entry]) -> list[Entry]:
    """Files newest first; equal timestamps fall back to name order."""
    by_name = sorted(entries, key=lambda entry: entry.name)
    return sorted(by_name, key=lambda entry: entry.date, reverse=True)


def scan_listing(
    directory: Path,
    root: Path,
    vendor_dir: str = VENDOR_DIR_NAME,
    skip_hidden: bool = False,
) -> tuple[Listing, list[Path]]:
    """Scan ``directory`` once and return its listing plus subdirectories to visit."""
    directories: list[Entry] = []
    files: list[Entry] = []
    subdirectories: list[Path] = []
    for child in list_directory_children(directory, vendor_dir, skip_hidden):
        entry = build_entry(child, root)
        if child.is_dir:
            directories.append(entry)
            subdirectories.append(child.path)
        else:
            files.append(entry)

    listing = Listing(
        directory=directory,
        breadcrumbs=tuple(to_breadcrumbs(directory, root)),
        directories=tuple(sort_directories(directories)),
        files=tuple(sort_files(files)),
    )
    subdirectories.sort(key=lambda path: path.name)
    return listing, subdirectories


def _replace_file(target: Path, content: str) -> None:
    """Delete ``target`` if present, then write ``content`` to a fresh file.

    ``content`` is encoded before ``target`` is touched, so an encoding failure
    leaves the previous file in place.
    """
    try:
        data = content.encode("utf-8")
        if target.exists() or target.is_symlink():
            target.unlink()
        with target.open("wb") as handle:
            handle.write(data)
    except (OSError, UnicodeError) as exc:
        raise ListingWriteError(f"Cannot write {target}: {exc}", target) from exc


def write_index_json(listing: Listing) -> Path:
    """Replace ``index.json`` with the listing's files, pretty-printed."""
    target = listing.directory / INDEX_JSON
    _replace_file(target, json.dumps(listing.to_json(), indent=2, ensure_ascii=False) + "\n")
    return target


def write_index_html(
    listing: Listing,
    renderer: ListingRenderer,
    vendor_dir: str = VENDOR_DIR_NAME,
) -> Path:
    """Replace ``index.html`` with the rendered page for ``listing``."""
    target = listing.directory / INDEX_HTML
    page = renderer.render(vendor_dir, listing.breadcrumbs, listing.entries)
    _replace_file(target, page)
    return target


def generate_index(
    directory: str | os.PathLike[str],
    root: str | os.PathLike[str] | None = None,
    *,
    vendor_dir: str = VENDOR_DIR_NAME,
    skip_hidden: bool = False,
    renderer: ListingRenderer | None = None,
) -> int:
    """Index ``directory`` and its whole subtree; return directories indexed.

    ``root`` is the traversal root used for web paths and breadcrumbs and
    defaults to ``directory``. Any ``IndexingError`` aborts the run; listings
    already written for completed subtrees are left in place.
    """
    start = Path(directory).resolve()
    root_path = Path(root).resolve() if root is not None else start
    if renderer is None:
        renderer = ListingRenderer()

    pending: dict[Path, Listing] = {}
    stack: list[tuple[Path, bool]] = [(start, False)]
    indexed = 0
    while stack:
        current, children_done = stack.pop()
        if children_done:
            listing = pending.pop(current)
            write_index_json(listing)
            write_index_html(listing, renderer, vendor_dir=vendor_dir)
            indexed += 1
            continue

        logger.info("Generating indices for %s", relative_web_path(current, root_path) or ".")
        listing, subdirectories = scan_listing(current, root_path, vendor_dir, skip_hidden)
        pending[current] = listing
        stack.append((current, True))
        for subdirectory in reversed(subdirectories):
            stack.append((subdirectory, False))
    return indexed


__all__ = [
    "build_entry",
    "sort_directories",
    "sort_files",
    "scan_listing",
    "write_index_json",
    "write_index_html",
    "generate_index",
]
