"""Split a large file into smaller indexed parts, by size or by count."""
from __future__ import annotations

from .exceptions import SplitterError, UsageError
from .models import ChunkInfo, SplitErrorKind, SplitMode, SplitRequest, SplitResult
from .services import run_split, split_by_count, split_by_size

__version__ = "0.1.0"

__all__ = [
    "ChunkInfo",
    "SplitErrorKind",
    "SplitMode",
    "SplitRequest",
    "SplitResult",
    "SplitterError",
    "UsageError",
    "run_split",
    "split_by_count",
    "split_by_size",
]
