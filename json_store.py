from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_json(raw: str | bytes) -> Any:
    """
    Parse standard JSON only: NaN, Infinity and -Infinity are refused.

    Raises ValueError for malformed input and RecursionError for nesting
    deeper than the interpreter can follow.
    """
    return json.loads(raw, parse_constant=_reject_constant)


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None only when the file does not exist. Empty files, invalid UTF-8
    and invalid JSON raise (ValueError subclasses) so callers can tell a fresh
    store from a damaged one.
    """
    if not path.exists():
        return None
    raw = path.read_text(encoding="utf-8")
    return parse_json(raw)


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    Key order is preserved and non-ASCII text is written as-is.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=indent, ensure_ascii=False, allow_nan=False)
            f.write("\n")
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
