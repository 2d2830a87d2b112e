"""Render ``index.html`` pages from listing data with Jinja2.

The template is packaged under ``cdnindex/templates``. Links are relative to
the page so a generated tree works from any mount point.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from jinja2 import Environment, PackageLoader, select_autoescape

from .types import Breadcrumb, Entry

TEMPLATE_NAME = "index.html"
DATE_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def _format_date(value: datetime) -> str:
    return value.strftime(DATE_DISPLAY_FORMAT)


def root_prefix(depth: int) -> str:
    """Relative prefix leading from a page ``depth`` levels down back to the root."""
    return "../" * depth


class ListingRenderer:
    """Jinja2 environment shared by every page written during one run."""

    def __init__(self) -> None:
        self.environment = Environment(
            loader=PackageLoader("cdnindex", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.environment.filters["display_date"] = _format_date

    def render(
        self,
        vendor_dir: str,
        breadcrumbs: Sequence[Breadcrumb],
        entries: Sequence[Entry],
    ) -> str:
        """Render one listing page."""
        template = self.environment.get_template(TEMPLATE_NAME)
        current = breadcrumbs[-1].path if breadcrumbs else ""
        return template.render(
            title=f"Index of /{current}",
            vendor_dir=vendor_dir,
            breadcrumbs=list(breadcrumbs),
            entries=list(entries),
            root=root_prefix(len(breadcrumbs)),
        )


__all__ = [
    "TEMPLATE_NAME",
    "ListingRenderer",
    "root_prefix",
]
