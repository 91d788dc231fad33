"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy raised by the scanner, prober and hasher.
Every error carries the offending path so callers can report it.
"""

from typing import Optional


class DupSweepError(Exception):
    """Base class for all errors raised by the duplicate detection core."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(DupSweepError):
    """Root directory does not exist or is not a directory."""


class AccessError(DupSweepError):
    """A file or directory cannot be stat-inspected or opened."""


class ReadError(DupSweepError):
    """A read failed part way through a file."""
