from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from .errors import CorruptDocumentError, DocumentTooDeepError, DocumentWriteError
from .interfaces import JsonDocumentStore

logger = logging.getLogger(__name__)

# The service holds exactly one document, so one lock covers every read and write.
DOCUMENT_LOCK = threading.Lock()


class DiskJsonDocumentStore(JsonDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - Returns None when the file does not exist yet.
    - Raises CorruptDocumentError when the file cannot be parsed.
    - Writes atomically, under DOCUMENT_LOCK.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Any | None:
        with DOCUMENT_LOCK:
            try:
                return read_json(self._path)
            except (ValueError, RecursionError) as e:
                # JSONDecodeError and UnicodeDecodeError are ValueErrors.
                logger.warning("DOCUMENT LOAD: %s is not readable JSON: %r", self._path, e)
                raise CorruptDocumentError(f"stored document at {self._path} is not valid JSON", path=self._path) from e

    def save(self, doc: Any) -> None:
        with DOCUMENT_LOCK:
            try:
                atomic_write_json(self._path, doc)
            except RecursionError as e:
                logger.warning("DOCUMENT SAVE: document for %s nests too deeply", self._path)
                raise DocumentTooDeepError(f"document for {self._path} nests too deeply", path=self._path) from e
            except (OSError, ValueError) as e:
                logger.exception("DOCUMENT SAVE: failed to write %s", self._path)
                raise DocumentWriteError(f"could not write document to {self._path}", path=self._path) from e
            logger.info("DOCUMENT SAVE: wrote %d bytes to %s", self._path.stat().st_size, self._path)
