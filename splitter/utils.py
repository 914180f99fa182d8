"""Utility helpers for the splitter."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


def part_path(source: Path, index: int) -> Path:
    """Return the path of part ``index`` for ``source``.

    Parts land beside the source as ``<stem>.<index><suffix>``, so
    ``data/archive.tar.gz`` becomes ``data/archive.tar.1.gz``. A dotfile has no
    suffix here, so ``.bashrc`` becomes ``.bashrc.1`` rather than ``.1.bashrc``.
    """

    source = Path(source).absolute()
    return source.parent / f"{source.stem}.{index}{source.suffix}"


def copy_bytes(src: BinaryIO, dst: BinaryIO, limit: int, block_size: int) -> int:
    """Copy up to ``limit`` bytes from ``src`` to ``dst``.

    Reads at most ``block_size`` bytes at a time and stops early when ``src``
    is exhausted. Returns the number of bytes copied.
    """

    copied = 0
    while copied < limit:
        block = src.read(min(block_size, limit - copied))
        if not block:
            break
        dst.write(block)
        copied += len(block)
    return copied
