from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, Field

from .disk_store import DiskJsonDocumentStore
from . import paths


class BookmarkDocument(BaseModel):
    """
    Shape of the document served before anything has been written:
      { "bookmarks": [], "groups": ["General"], "appTitle": "MarkKeeper" }

    Stored documents are passed through untouched; this model is never used to
    validate what clients send.
    """

    bookmarks: list[Any] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=lambda: ["General"])
    appTitle: str = "MarkKeeper"


def default_document() -> dict[str, Any]:
    return BookmarkDocument().model_dump(mode="json")


class BookmarkDocumentRepository(Protocol):
    def fetch(self) -> Any:
        ...

    def replace(self, doc: Any) -> None:
        ...


class DiskBookmarkDocumentRepository(BookmarkDocumentRepository):
    """
    The whole bookmark collection lives in one JSON file:

    - data/bookmark.json (name and directory are configurable)

    A missing file falls back to default_document() without creating it.
    """

    def __init__(self):
        self._store = DiskJsonDocumentStore(paths.document_path(paths.data_dir()))

    @property
    def store(self) -> DiskJsonDocumentStore:
        return self._store

    def fetch(self) -> Any:
        doc = self._store.load()
        if doc is None:
            return default_document()
        return doc

    def replace(self, doc: Any) -> None:
        self._store.save(doc)
