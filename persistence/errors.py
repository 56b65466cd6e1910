from __future__ import annotations

from pathlib import Path


class DocumentStoreError(Exception):
    """Base class for failures of the on-disk document store."""

    def __init__(self, message: str, *, path: Path):
        super().__init__(message)
        self.path = path


class CorruptDocumentError(DocumentStoreError):
    """The stored file exists but does not hold parseable JSON."""


class DocumentWriteError(DocumentStoreError):
    """The document could not be written (permissions, disk full, ...)."""


class DocumentTooDeepError(DocumentWriteError):
    """The document nests deeper than the JSON encoder can follow."""
