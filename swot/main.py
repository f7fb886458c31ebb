"""SWOT Board — FastAPI service entry point."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from swot.config import settings
from swot.middleware import MetricsMiddleware
from swot.routers import analysis, health, items, metrics, transfer
from swot.session import Session
from swot.storage.redis_client import KeyValueStore, RedisStore
from swot.storage.repository import Repository
from swot.telemetry.logging import setup_logging
from swot.telemetry.tracing import setup_tracing

logger = logging.getLogger("swot")


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Build the application; ``store`` overrides the Redis store from settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing SWOT Board...")

        owned_store = None
        kv_store = store
        if kv_store is None:
            owned_store = kv_store = RedisStore.from_url(settings.redis_url)
            logger.info("Using Redis store: %s", settings.redis_url)

        # One worker keeps snapshot writes in order.
        save_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="swot-save")
        app.state.repository = Repository(kv_store, settings.store_key, executor=save_executor)
        # A missing or broken snapshot yields an empty session.
        app.state.session = Session.open(app.state.repository)
        logger.info("SWOT Board ready on %s:%d", settings.host, settings.port)

        yield

        app.state.session = None
        save_executor.shutdown(wait=True)
        if owned_store is not None:
            owned_store.close()
        logger.info("SWOT Board shut down")

    app = FastAPI(
        title="SWOT Board",
        description="Record SWOT items, rank them into an action list, export and import them",
        version=settings.service_version,
        lifespan=lifespan,
    )

    app.add_middleware(MetricsMiddleware)

    app.include_router(health.router)
    app.include_router(items.router)
    app.include_router(analysis.router)
    app.include_router(transfer.router)
    app.include_router(metrics.router)

    FastAPIInstrumentor.instrument_app(app)
    return app


if settings.otlp_endpoint:
    setup_tracing(otlp_endpoint=settings.otlp_endpoint)
setup_logging(otlp_endpoint=settings.otlp_endpoint, level=settings.log_level)

app = create_app()


def run() -> None:
    uvicorn.run("swot.main:app", host=settings.host, port=settings.port)
