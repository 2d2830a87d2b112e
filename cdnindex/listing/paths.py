"""Web-path normalization and breadcrumb trails.

Web paths are forward-slash joined and contain only normal segments, so they
are usable as relative links regardless of the host's native path syntax.
Segments that are not valid UTF-8 are decoded lossily, with U+FFFD in place
of the undecodable bytes.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from .types import Breadcrumb

_SKIPPED_SEGMENTS = frozenset({"", ".", ".."})


def lossy_name(name: str) -> str:
    """Return ``name`` with undecodable filesystem bytes replaced by U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def to_web_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` as ``a/b/c`` with root, anchor, ``.`` and ``..`` segments dropped."""
    pure = PurePath(path)
    parts = pure.parts
    if pure.anchor:
        parts = parts[1:]
    return "/".join(lossy_name(part) for part in parts if part not in _SKIPPED_SEGMENTS)


def relative_web_path(path: str | os.PathLike[str], root: str | os.PathLike[str]) -> str:
    """Web path of ``path`` relative to traversal ``root``.

    Raises ``ValueError`` when ``path`` is not under ``root``.
    """
    return to_web_path(PurePath(path).relative_to(PurePath(root)))


def to_breadcrumbs(directory: str | os.PathLike[str], root: str | os.PathLike[str] = ".") -> list[Breadcrumb]:
    """Build the root-to-leaf trail for ``directory``.

    Walks parent by parent until the traversal root is reached; the root
    itself contributes no crumb, so indexing the root yields ``[]``.
    """
    current = PurePath(directory).relative_to(PurePath(root))

    crumbs: list[Breadcrumb] = []
    while current.name and to_web_path(current):
        crumbs.append(Breadcrumb(name=lossy_name(current.name), path=to_web_path(current)))
        current = current.parent
    crumbs.reverse()
    return crumbs


__all__ = [
    "lossy_name",
    "to_web_path",
    "relative_web_path",
    "to_breadcrumbs",
]
