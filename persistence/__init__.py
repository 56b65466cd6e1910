from __future__ import annotations

from .bookmark_state import BookmarkDocument, BookmarkDocumentRepository, DiskBookmarkDocumentRepository, default_document
from .errors import CorruptDocumentError, DocumentStoreError, DocumentTooDeepError, DocumentWriteError
from .repositories import AsyncBookmarkDocumentRepository, AsyncDiskBookmarkDocumentRepository

__all__ = [
    "BookmarkDocument",
    "BookmarkDocumentRepository",
    "DiskBookmarkDocumentRepository",
    "default_document",
    "AsyncBookmarkDocumentRepository",
    "AsyncDiskBookmarkDocumentRepository",
    "DocumentStoreError",
    "CorruptDocumentError",
    "DocumentWriteError",
    "DocumentTooDeepError",
]
