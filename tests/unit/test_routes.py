from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from journal_analytics.app.analytics import AnalyticsEngine
from journal_analytics.app.api.v1.routes import compute_analytics, list_moods, list_tags
from journal_analytics.app.catalog import MoodCategory
from journal_analytics.app.schemas import AnalyticsRequest


def _settings(**overrides) -> SimpleNamespace:
    values = {
        "max_entries_per_request": 100,
        "analytics_default_range": "all",
        "today": lambda: date(2024, 1, 3),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.mark.anyio
async def test_compute_analytics_applies_default_range() -> None:
    payload = AnalyticsRequest.model_validate(
        {
            "entries": [
                {"id": 1, "entry_date": "2023-11-01", "primary_mood": "Sad"},
                {"id": 2, "entry_date": "2024-01-02", "primary_mood": "Calm"},
            ]
        }
    )
    engine = AnalyticsEngine(clock=lambda: date(2024, 1, 3))

    report = await compute_analytics(
        payload,
        engine=engine,
        settings=_settings(analytics_default_range="30d"),
    )

    assert report.total_entries == 1
    assert report.window_start == date(2023, 12, 4)
    assert report.most_frequent_mood is not None
    assert report.most_frequent_mood.label == "Calm"


@pytest.mark.anyio
async def test_compute_analytics_enforces_entry_limit() -> None:
    payload = AnalyticsRequest.model_validate(
        {"entries": [{"id": 1, "entry_date": "2024-01-01", "primary_mood": "Happy"}]}
    )

    with pytest.raises(HTTPException) as excinfo:
        await compute_analytics(
            payload,
            engine=AnalyticsEngine(),
            settings=_settings(max_entries_per_request=0),
        )

    assert excinfo.value.status_code == 413


@pytest.mark.anyio
async def test_catalog_routes() -> None:
    moods = await list_moods()
    tags = await list_tags()

    assert {group.category for group in moods.items} == set(MoodCategory)
    assert tags.items[0] == "Birthday"
