# lolomo/main.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from fastapi import FastAPI

from .catalog import catalog_router
from .catalog.artwork import ArtworkGenerator
from .catalog.service import LolomoService
from .catalog.store import Catalog
from .config import Settings
from .graphql import graphql_router

logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> LolomoService:
    # The pool lives as long as the process; nothing shuts it down.
    executor = ThreadPoolExecutor(
        max_workers=settings.artwork_pool_size, thread_name_prefix="artwork"
    )
    logger.info(
        "Artwork pool: %s workers, %s ms delay",
        settings.artwork_pool_size,
        settings.artwork_delay_ms,
    )
    return LolomoService(
        catalog=Catalog(),
        artwork=ArtworkGenerator(delay_seconds=settings.artwork_delay_seconds),
        executor=executor,
        fallback=settings.artwork_fallback,
        timeout=settings.artwork_timeout_seconds,
    )


def create_app(
    settings: Optional[Settings] = None, service: Optional[LolomoService] = None
) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(
        title="lolomo",
        description="Catalogue rows and title search with lazily generated artwork.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.service = service or build_service(settings)

    # Quick liveness probe
    @app.get("/")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    app.include_router(catalog_router)
    app.include_router(graphql_router, prefix="/graphql")
    return app


app = create_app()
