from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ...analytics import AnalyticsEngine, resolve_window
from ...catalog import MoodCategory, emoji_for, moods_by_category, prebuilt_tags
from ...core.config import Settings, get_settings
from ...schemas.analytics import (
    AnalyticsReport,
    AnalyticsRequest,
    MoodCatalogResponse,
    MoodGroup,
    TagCatalogResponse,
)

router = APIRouter(prefix="/api/v1", tags=["analytics"])


def get_analytics_engine(request: Request) -> AnalyticsEngine:
    return request.app.state.analytics_engine


@router.post("/analytics", response_model=AnalyticsReport)
async def compute_analytics(
    payload: AnalyticsRequest,
    engine: AnalyticsEngine = Depends(get_analytics_engine),
    settings: Settings = Depends(get_settings),
) -> AnalyticsReport:
    if len(payload.entries) > settings.max_entries_per_request:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"at most {settings.max_entries_per_request} entries per request",
        )
    start, end = resolve_window(
        payload.start_date,
        payload.end_date,
        payload.range or settings.analytics_default_range,
        today=settings.today(),
    )
    return engine.compute(payload.entries, start, end)


@router.get("/moods", response_model=MoodCatalogResponse)
async def list_moods() -> MoodCatalogResponse:
    items = [
        MoodGroup(
            category=category,
            emoji=emoji_for(category),
            moods=moods_by_category(category),
        )
        for category in MoodCategory
    ]
    return MoodCatalogResponse(items=items)


@router.get("/tags", response_model=TagCatalogResponse)
async def list_tags() -> TagCatalogResponse:
    return TagCatalogResponse(items=prebuilt_tags())
