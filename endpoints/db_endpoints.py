from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from json_store import parse_json
from persistence.errors import CorruptDocumentError, DocumentTooDeepError, DocumentWriteError
from persistence import repositories as persistence_repositories
from settings import get_settings

router = APIRouter(tags=["db"])
logger = logging.getLogger(__name__)

SETTINGS = get_settings()
MAX_BODY_BYTES = SETTINGS.max_body_bytes
DEBUG_LOG_REQUESTS = SETTINGS.debug_log_requests

DOCUMENT_REPO = persistence_repositories.AsyncDiskBookmarkDocumentRepository()


async def _read_body_limited(request: Request, limit: int) -> bytes:
    """
    Read the request body, refusing anything larger than `limit` bytes.

    A declared Content-Length is checked first; the streamed size is checked
    too, so chunked uploads cannot slip past the limit.
    """
    declared = request.headers.get("content-length")
    if declared is not None:
        try:
            declared_len = int(declared)
        except ValueError:
            raise HTTPException(status_code=400, detail="invalid_content_length")
        if declared_len < 0:
            raise HTTPException(status_code=400, detail="invalid_content_length")
        if declared_len > limit:
            raise HTTPException(status_code=413, detail="payload_too_large")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(status_code=413, detail="payload_too_large")
    return bytes(body)


def _parse_document(body: bytes) -> Any:
    if not body.strip():
        raise HTTPException(status_code=400, detail="empty_body")
    try:
        doc = parse_json(body)
    except RecursionError:
        raise HTTPException(status_code=400, detail="document_too_deep")
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid_json")
    # Only objects and arrays are accepted as a document.
    if not isinstance(doc, (dict, list)):
        raise HTTPException(status_code=400, detail="invalid_document")
    return doc


@router.get("/db")
async def fetch_document() -> JSONResponse:
    try:
        doc = await DOCUMENT_REPO.fetch()
    except CorruptDocumentError as e:
        logger.warning("FETCH: corrupt store at %s", e.path)
        raise HTTPException(status_code=500, detail="corrupt_store")
    return JSONResponse(doc)


@router.post("/db")
async def replace_document(request: Request) -> Response:
    body = await _read_body_limited(request, MAX_BODY_BYTES)
    if DEBUG_LOG_REQUESTS:
        logger.info("REPLACE REQUEST: %d bytes", len(body))
    doc = _parse_document(body)
    try:
        await DOCUMENT_REPO.replace(doc)
    except DocumentTooDeepError:
        raise HTTPException(status_code=400, detail="document_too_deep")
    except DocumentWriteError:
        raise HTTPException(status_code=500, detail="store_write_failed")
    return Response(status_code=200)
