"""Public package surface for cdnindex.

Exports ``main`` for programmatic CLI invocation.
Indexing lives in ``cdnindex.listing``; asset bundling in ``cdnindex.assets``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
