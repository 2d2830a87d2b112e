"""Extension to icon-key classification.

Keys name the bundled ``icons/<key>.svg`` assets. Matching is case-sensitive
on the text after the last dot of the base name.
"""

from __future__ import annotations

import os
from pathlib import PurePath

DIRECTORY_ICON = "dir"
DEFAULT_ICON = "text"

_ICON_EXTENSIONS: dict[str, tuple[str, ...]] = {
    # archives
    "comp": ("comp",),
    "compressed": ("zip", "tar", "tgz", "rar", "gz", "bz2"),
    # office formats
    "doc": ("doc", "docx"),
    "xls": ("xls", "xlsx"),
    "ppt": ("ppt", "pptx"),
    "text": ("txt", "text", "html", "htm", "md", "mdown", "markdown"),
    "pdf": ("pdf",),
    # still media
    "image": ("jpg", "jpeg", "png", "gif", "tif", "tiff", "webp"),
    "ps": ("ps",),
    # audio/video
    "sound": ("mp3", "wav", "m4a", "ogg"),
    "movie": ("wmv", "avi", "mp4", "webm"),
    "mov": ("mov", "qt"),
    # source code
    "java": ("java",),
    "js": ("js",),
    "php": ("php",),
}

ICON_BY_EXTENSION: dict[str, str] = {
    extension: icon
    for icon, extensions in _ICON_EXTENSIONS.items()
    for extension in extensions
}

ICON_KEYS: tuple[str, ...] = (DIRECTORY_ICON, *_ICON_EXTENSIONS)


def file_extension(path: str | os.PathLike[str]) -> str:
    """Return the extension without its dot, or ``""`` when there is none."""
    return PurePath(path).suffix[1:]


def icon_for(path: str | os.PathLike[str], is_dir: bool) -> str:
    """Return the icon key for ``path``."""
    if is_dir:
        return DIRECTORY_ICON
    return ICON_BY_EXTENSION.get(file_extension(path), DEFAULT_ICON)


__all__ = [
    "DIRECTORY_ICON",
    "DEFAULT_ICON",
    "ICON_BY_EXTENSION",
    "ICON_KEYS",
    "file_extension",
    "icon_for",
]
