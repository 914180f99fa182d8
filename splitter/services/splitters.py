"""Splitters that cut a source file into indexed parts."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from splitter.config import get_settings
from splitter.models import ChunkInfo, SplitErrorKind, SplitMode, SplitRequest, SplitResult
from splitter.utils import copy_bytes, part_path

logger = logging.getLogger(__name__)

COMPLETED_MESSAGE = "Completed!"
ACCESS_DENIED_MESSAGE = "ERROR: Access is denied."


def _access_denied(source: Path, chunks: List[ChunkInfo], exc: PermissionError) -> SplitResult:
    logger.error(f"Access denied while splitting {source}: {exc}")
    print(ACCESS_DENIED_MESSAGE)
    return SplitResult(
        success=False,
        chunks=chunks,
        error_kind=SplitErrorKind.ACCESS_DENIED,
        error=str(exc),
    )


def _record(chunks: List[ChunkInfo], index: int, destination: Path, size: int) -> None:
    chunk = ChunkInfo(index=index, path=destination, size=size)
    chunks.append(chunk)
    print(chunk.status_line())


def split_by_size(
    file_path: str | Path,
    chunk_size: int,
    block_size: Optional[int] = None,
) -> SplitResult:
    """
    Split a file into parts of ``chunk_size`` bytes.

    The last part holds the remainder. No part is created once the source
    is exhausted, so an empty source yields no parts at all.

    Args:
        file_path: Path to the source file
        chunk_size: Size of every part but the last, in bytes
        block_size: Read unit while copying a part (defaults to settings)

    Returns:
        SplitResult listing the produced parts
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    source = Path(file_path)
    if block_size is None:
        block_size = get_settings().copy_block_size
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    chunks: List[ChunkInfo] = []
    logger.info(f"Splitting {source} into parts of {chunk_size} bytes")

    try:
        with source.open("rb") as src:
            index = 1
            while True:
                head = src.read(min(block_size, chunk_size))
                if not head:
                    break

                destination = part_path(source, index)
                with destination.open("wb") as dst:
                    dst.write(head)
                    written = len(head) + copy_bytes(
                        src, dst, chunk_size - len(head), block_size
                    )
                    dst.flush()

                _record(chunks, index, destination, written)
                index += 1
    except PermissionError as exc:
        return _access_denied(source, chunks, exc)

    logger.info(f"Split {source} into {len(chunks)} files")
    print(COMPLETED_MESSAGE)
    return SplitResult(success=True, chunks=chunks)


def split_by_count(
    file_path: str | Path,
    count: int,
    block_size: Optional[int] = None,
) -> SplitResult:
    """
    Split a file into exactly ``count`` parts.

    Every part holds ``size // count`` bytes except the last, which also
    takes the ``size % count`` remainder. Parts are created for every index
    even when they end up empty.

    Args:
        file_path: Path to the source file
        count: Number of parts to produce
        block_size: Read unit while copying a part (defaults to settings)

    Returns:
        SplitResult listing the produced parts
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    source = Path(file_path)
    if block_size is None:
        block_size = get_settings().copy_block_size
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    chunks: List[ChunkInfo] = []

    try:
        with source.open("rb") as src:
            file_size = os.fstat(src.fileno()).st_size
            part_size = file_size // count
            last_part_size = part_size + file_size % count
            logger.info(
                f"Splitting {source} ({file_size} bytes) into {count} parts "
                f"of {part_size} bytes (last {last_part_size})"
            )

            for index in range(1, count + 1):
                size = last_part_size if index == count else part_size
                destination = part_path(source, index)
                with destination.open("wb") as dst:
                    written = copy_bytes(src, dst, size, block_size)
                    dst.flush()

                if written != size:
                    logger.warning(
                        f"Part {index} of {source} is short: expected {size} bytes, "
                        f"wrote {written}"
                    )
                _record(chunks, index, destination, written)
    except PermissionError as exc:
        return _access_denied(source, chunks, exc)

    logger.info(f"Split {source} into {len(chunks)} files")
    print(COMPLETED_MESSAGE)
    return SplitResult(success=True, chunks=chunks)


def run_split(request: SplitRequest) -> SplitResult:
    """Route a validated request to the matching splitter."""
    if request.mode is SplitMode.SIZE:
        return split_by_size(request.path, request.value)
    return split_by_count(request.path, request.value)
