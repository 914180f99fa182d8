"""Request/result models for split operations."""
from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

INT64_MAX = 2**63 - 1
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


class SplitMode(str, Enum):
    SIZE = "-size"
    COUNT = "-count"

    @classmethod
    def parse(cls, flag: str) -> Optional["SplitMode"]:
        """Return the mode for ``flag`` (case-insensitive), or ``None``."""
        try:
            return cls(flag.lower())
        except ValueError:
            return None


class SplitErrorKind(str, Enum):
    ACCESS_DENIED = "access_denied"


class SplitRequest(BaseModel):
    """A validated split invocation."""

    path: Path
    mode: SplitMode
    value: int = Field(..., gt=0, le=INT64_MAX)

    @field_validator("path", mode="before")
    @classmethod
    def _strip_quotes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip('"')
        return value

    @field_validator("value", mode="before")
    @classmethod
    def _plain_integer(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("value must be an integer")
        if isinstance(value, str):
            if not _INTEGER_RE.match(value):
                raise ValueError(f"'{value}' is not a decimal integer")
            return int(value)
        return value

    @model_validator(mode="after")
    def _count_fits_int32(self) -> "SplitRequest":
        if self.mode is SplitMode.COUNT and self.value > INT32_MAX:
            raise ValueError(f"count {self.value} exceeds {INT32_MAX}")
        return self


class ChunkInfo(BaseModel):
    index: int
    path: Path
    size: int

    def status_line(self) -> str:
        return f"{self.index}: {self.path} ({self.size} bytes)"


class SplitResult(BaseModel):
    """Result of a split operation."""

    success: bool
    chunks: List[ChunkInfo] = Field(default_factory=list)
    error_kind: Optional[SplitErrorKind] = None
    error: Optional[str] = None

    @property
    def total_bytes(self) -> int:
        return sum(chunk.size for chunk in self.chunks)
