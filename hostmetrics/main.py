from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from hostmetrics.api.routes import router
from hostmetrics.collectors import HostMetricsProvider, MetricsProvider
from hostmetrics.config import SAMPLE_INTERVAL_SECONDS, settings
from hostmetrics.engine import Sampler, SnapshotStore

logger = logging.getLogger(__name__)


def create_app(
    provider: MetricsProvider | None = None,
    interval: float = SAMPLE_INTERVAL_SECONDS,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── startup ───────────────────────────────────────
        store = SnapshotStore()
        sampler = Sampler(store, provider or HostMetricsProvider(), interval=interval)
        await sampler.start()

        app.state.store = store
        app.state.sampler = sampler

        yield

        # ── shutdown ──────────────────────────────────────
        await sampler.stop()

    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
