from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Protocol

from .bookmark_state import DiskBookmarkDocumentRepository


class AsyncBookmarkDocumentRepository(Protocol):
    """
    Whole-document persistence: read everything, or overwrite everything.
    There is no merge and no partial update.
    """

    async def fetch(self) -> Any: ...
    async def replace(self, doc: Any) -> None: ...


class AsyncDiskBookmarkDocumentRepository(AsyncBookmarkDocumentRepository):
    """
    Async wrapper around the disk-backed bookmark repository.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self) -> None:
        self._repo = DiskBookmarkDocumentRepository()

    @property
    def path(self) -> Path:
        return self._repo.store.path

    async def fetch(self) -> Any:
        return await asyncio.to_thread(self._repo.fetch)

    async def replace(self, doc: Any) -> None:
        await asyncio.to_thread(self._repo.replace, doc)
