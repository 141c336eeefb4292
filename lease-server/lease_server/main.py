import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lease_server import __version__
from lease_server.core.config import get_settings
from lease_server.core.container import get_container
from lease_server.core.logging import configure_logging
from lease_server.infrastructure.database import dispose_engine, init_db
from lease_server.interfaces.http import create_api_router

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    container = get_container()
    await init_db()
    logger.info(
        "%s %s started, leases last %s seconds",
        settings.project_name,
        __version__,
        settings.lease_duration_seconds,
    )
    yield
    await container.aclose()
    get_container.cache_clear()
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Lease lifecycle for devices rented out on the P2P VPS marketplace",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "lease_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
