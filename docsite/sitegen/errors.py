"""Errors raised while writing the site to disk."""

from __future__ import annotations


class FileSystemError(OSError):
    """Raised when a directory or page cannot be created or written."""


__all__ = ["FileSystemError"]
