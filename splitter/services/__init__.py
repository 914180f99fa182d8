"""Service layer exports."""
from .splitters import (
    ACCESS_DENIED_MESSAGE,
    COMPLETED_MESSAGE,
    run_split,
    split_by_count,
    split_by_size,
)

__all__ = [
    "ACCESS_DENIED_MESSAGE",
    "COMPLETED_MESSAGE",
    "run_split",
    "split_by_count",
    "split_by_size",
]
