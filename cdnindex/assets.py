"""Materialize the bundled stylesheet and icons into the vendor directory.

The bundle ships as package data under ``cdnindex/vendor`` and is read through
``importlib.resources``, never from the tree being indexed.
"""

from __future__ import annotations

import logging
import shutil
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from .errors import AssetProvisionError

logger = logging.getLogger(__name__)

VENDOR_DIR_NAME = "_vendor"
BUNDLE_PACKAGE = "cdnindex"
BUNDLE_DIRECTORY = "vendor"


def asset_bundle() -> Traversable:
    """Return the packaged asset bundle root."""
    return resources.files(BUNDLE_PACKAGE).joinpath(BUNDLE_DIRECTORY)


def _extract(source: Traversable, target: Path) -> int:
    """Copy ``source`` recursively into existing directory ``target``."""
    written = 0
    for item in source.iterdir():
        destination = target / item.name
        if item.is_dir():
            destination.mkdir()
            written += _extract(item, destination)
        else:
            destination.write_bytes(item.read_bytes())
            written += 1
    return written


def _remove_existing(target: Path) -> None:
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.exists():
        shutil.rmtree(target)


def provision_vendor_dir(
    root: Path,
    name: str = VENDOR_DIR_NAME,
    bundle: Traversable | None = None,
) -> Path:
    """Replace ``root/name`` with a fresh copy of the asset bundle.

    Anything left over from an earlier run is removed first. Filesystem
    errors are raised as ``AssetProvisionError``.
    """
    target = Path(root) / name
    source = asset_bundle() if bundle is None else bundle
    try:
        _remove_existing(target)
        target.mkdir()
        written = _extract(source, target)
    except OSError as exc:
        raise AssetProvisionError(f"Cannot provision {target}: {exc}", target) from exc
    logger.debug("Wrote %d vendor assets to %s", written, target)
    return target


__all__ = [
    "VENDOR_DIR_NAME",
    "asset_bundle",
    "provision_vendor_dir",
]
