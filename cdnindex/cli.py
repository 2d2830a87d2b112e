"""Command-line front door for cdnindex.

Provisions the vendor asset directory at the traversal root, then writes
``index.json`` and ``index.html`` into every directory below it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .assets import VENDOR_DIR_NAME, provision_vendor_dir
from .errors import IndexingError
from .listing import generate_index

logger = logging.getLogger(__name__)


def configure_logging(quiet: bool) -> None:
    """Send progress lines to stderr; quiet mode keeps warnings and errors only."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("cdnindex")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.WARNING if quiet else logging.INFO)
    package_logger.propagate = False


def run(root: Path, skip_hidden: bool = False) -> int:
    """Provision assets under ``root`` and index the whole tree.

    Returns the number of directories indexed. Raises ``IndexingError`` on any
    fatal failure; assets are provisioned before any listing is touched.
    """
    provision_vendor_dir(root, VENDOR_DIR_NAME)
    return generate_index(root, root, vendor_dir=VENDOR_DIR_NAME, skip_hidden=skip_hidden)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and index a tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is the traversal root. Fatal errors exit non-zero with a message.
    """
    parser = argparse.ArgumentParser(
        description="Write index.json and index.html listings into every directory of a tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Tree root. Defaults to current directory.")
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=None,
        help="Only report errors (default from config).",
    )
    parser.add_argument(
        "--skip-hidden",
        action="store_true",
        default=None,
        help="Leave dot-prefixed files and directories out of listings (default from config).",
    )
    args = parser.parse_args()

    quiet = config.load_quiet() if args.quiet is None else args.quiet
    skip_hidden = config.load_skip_hidden() if args.skip_hidden is None else args.skip_hidden
    configure_logging(quiet)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    try:
        indexed = run(root, skip_hidden=skip_hidden)
    except IndexingError as exc:
        raise SystemExit(f"cdnindex: {exc}") from exc
    logger.info("Indexed %d directories", indexed)


if __name__ == "__main__":
    main()
