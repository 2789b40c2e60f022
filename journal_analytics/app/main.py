from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .analytics import AnalyticsEngine
from .api.v1.routes import router as v1_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .middleware import BodySizeLimitMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and the analytics engine during startup."""

    configure_logging()
    settings: Settings = get_settings()

    app.state.settings = settings
    app.state.analytics_engine = AnalyticsEngine(clock=settings.today)

    logger.info(
        "Starting journal analytics %s timezone=%s default_range=%s",
        settings.version,
        settings.analytics_timezone,
        settings.analytics_default_range,
    )
    yield


app = FastAPI(title="Journal Analytics", version=get_settings().version, lifespan=lifespan)
app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.include_router(v1_router)


@app.get("/healthz")
async def healthz(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "version": settings.version}


@app.get("/metrics")
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
