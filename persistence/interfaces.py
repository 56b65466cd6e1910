from __future__ import annotations

from typing import Any, Protocol


class JsonDocumentStore(Protocol):
    """
    Minimal DB-friendly interface: one JSON value persisted under a fixed key.
    """

    def load(self) -> Any | None:
        """Load and return the full document, or None if nothing was ever saved."""
        ...

    def save(self, doc: Any) -> None:
        """Persist the full document atomically, replacing what was there."""
        ...
