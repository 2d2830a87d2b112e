"""Human-readable byte sizes using binary (1024-based) units."""

from __future__ import annotations

_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_size(size_bytes: int) -> str:
    """Format ``size_bytes`` as ``"512 bytes"`` or ``"4.20 KiB"``."""
    if size_bytes < 1024:
        return "1 byte" if size_bytes == 1 else f"{size_bytes} bytes"

    value = float(size_bytes)
    unit = _UNITS[0]
    for unit in _UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.2f} {unit}"


__all__ = ["format_size"]
