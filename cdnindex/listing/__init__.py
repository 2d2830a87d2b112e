"""Per-directory listing model, scanning, and output writers.

This package contains the indexing core:
- entry/breadcrumb/listing datatypes
- directory scanning with the ignore filter
- icon, size, and web-path helpers
- ``index.json`` / ``index.html`` generation over a whole tree
"""

from __future__ import annotations

from .types import DIRECTORY_SIZE_LABEL, Breadcrumb, Entry, Listing
from .fs import (
    INDEX_HTML,
    INDEX_JSON,
    DirectoryChild,
    list_directory_children,
    should_ignore,
)
from .icons import DEFAULT_ICON, DIRECTORY_ICON, ICON_KEYS, icon_for
from .paths import lossy_name, relative_web_path, to_breadcrumbs, to_web_path
from .render import ListingRenderer
from .sizes import format_size
from .generator import (
    build_entry,
    generate_index,
    scan_listing,
    sort_directories,
    sort_files,
    write_index_html,
    write_index_json,
)

__all__ = [
    "DIRECTORY_SIZE_LABEL",
    "Breadcrumb",
    "Entry",
    "Listing",
    "INDEX_HTML",
    "INDEX_JSON",
    "DirectoryChild",
    "list_directory_children",
    "should_ignore",
    "DEFAULT_ICON",
    "DIRECTORY_ICON",
    "ICON_KEYS",
    "icon_for",
    "lossy_name",
    "relative_web_path",
    "to_breadcrumbs",
    "to_web_path",
    "ListingRenderer",
    "format_size",
    "build_entry",
    "generate_index",
    "scan_listing",
    "sort_directories",
    "sort_files",
    "write_index_html",
    "write_index_json",
]
