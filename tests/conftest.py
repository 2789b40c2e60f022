from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from journal_analytics.app.analytics import AnalyticsEngine
from journal_analytics.app.core import config
from journal_analytics.app.schemas import JournalEntry

FROZEN_TODAY = date(2024, 1, 3)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def make_entry() -> Callable[..., JournalEntry]:
    counter = {"next_id": 1}

    def _make(entry_date: date, **overrides: Any) -> JournalEntry:
        payload: dict[str, Any] = {
            "id": counter["next_id"],
            "entry_date": entry_date,
            "content": "a quiet day",
            "primary_mood": {"label": "Happy", "category": "Positive"},
        }
        payload.update(overrides)
        counter["next_id"] += 1
        return JournalEntry.model_validate(payload)

    return _make


@pytest.fixture()
def engine() -> AnalyticsEngine:
    return AnalyticsEngine(clock=lambda: FROZEN_TODAY)


@pytest.fixture()
def test_client(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Generator[TestClient, None, None]:
    monkeypatch.setenv("VERSION", "0.1.0-test")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
    monkeypatch.delenv("ANALYTICS_DEFAULT_RANGE", raising=False)
    monkeypatch.delenv("MAX_ENTRIES_PER_REQUEST", raising=False)
    monkeypatch.delenv("MAX_REQUEST_BYTES", raising=False)
    config.get_settings.cache_clear()

    from journal_analytics.app.main import app

    with TestClient(app) as client:
        app.state.analytics_engine = AnalyticsEngine(clock=lambda: FROZEN_TODAY)
        yield client
    config.get_settings.cache_clear()
