"""Custom exceptions for the splitter."""

from __future__ import annotations


class SplitterError(RuntimeError):
    """Base exception for splitter errors."""


class UsageError(SplitterError):
    """Raised when the command line does not describe a valid split."""
