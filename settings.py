from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Server
    host: str
    port: int

    # Storage
    data_dir: Path | None
    document_filename: str

    # Request limits
    max_body_bytes: int

    # Logging / debug
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    host = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = _env_int("PORT", 3000)

    # Unset means "<project root>/data", resolved by persistence.paths.
    raw_data_dir = os.getenv("BOOKMARK_DATA_DIR", "").strip()
    data_dir = Path(raw_data_dir).expanduser() if raw_data_dir else None
    document_filename = os.getenv("BOOKMARK_DOCUMENT_FILE", "bookmark.json").strip() or "bookmark.json"

    max_body_bytes = _env_int("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)
    if max_body_bytes <= 0:
        max_body_bytes = DEFAULT_MAX_BODY_BYTES

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        host=host,
        port=port,
        data_dir=data_dir,
        document_filename=document_filename,
        max_body_bytes=max_body_bytes,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
