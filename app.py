from __future__ import annotations

import contextlib
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv

from settings import get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from persistence import paths

    data_dir = paths.data_dir()
    logger.info("Bookmark document at %s", paths.document_path(data_dir))
    yield


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.db_endpoints import router as db_router

    app = FastAPI(title="MarkKeeper Sync", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(db_router)

    return app


def main() -> None:
    load_dotenv("local.env")
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Sync server active on port %s", settings.port)
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


app = create_app()


if __name__ == "__main__":
    main()
