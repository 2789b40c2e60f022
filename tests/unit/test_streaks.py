from __future__ import annotations

from datetime import date, timedelta

import pytest

from journal_analytics.app.analytics.streaks import (
    StreakSummary,
    current_streak,
    longest_streak,
    missed_days,
    summarize_streaks,
)


def _days(*values: str) -> list[date]:
    return [date.fromisoformat(value) for value in values]


def test_longest_streak_consecutive_days() -> None:
    assert longest_streak(_days("2024-01-01", "2024-01-02", "2024-01-03")) == 3


def test_longest_streak_resets_on_gap() -> None:
    assert longest_streak(_days("2024-01-01", "2024-01-03")) == 1
    assert longest_streak(
        _days("2024-01-01", "2024-01-02", "2024-01-05", "2024-01-06", "2024-01-07")
    ) == 3


def test_longest_streak_single_and_empty() -> None:
    assert longest_streak(_days("2024-05-05")) == 1
    assert longest_streak([]) == 0


def test_longest_streak_ignores_duplicates_and_order() -> None:
    dates = _days("2024-01-03", "2024-01-01", "2024-01-02", "2024-01-02", "2024-01-01")
    assert longest_streak(dates) == 3


def test_current_streak_counts_back_from_today() -> None:
    dates = _days("2024-01-01", "2024-01-02", "2024-01-03")
    assert current_streak(dates, date(2024, 1, 3)) == 3


def test_current_streak_grace_for_today() -> None:
    dates = _days("2024-01-01", "2024-01-02")
    assert current_streak(dates, date(2024, 1, 3)) == 2


def test_current_streak_broken_when_last_entry_before_yesterday() -> None:
    dates = _days("2024-01-01", "2024-01-02")
    assert current_streak(dates, date(2024, 1, 4)) == 0


def test_current_streak_stops_at_first_gap() -> None:
    dates = _days("2023-12-28", "2024-01-01", "2024-01-02", "2024-01-03")
    assert current_streak(dates, date(2024, 1, 3)) == 3


def test_current_streak_ignores_future_dates() -> None:
    dates = _days("2024-01-02", "2024-01-03", "2024-01-10")
    assert current_streak(dates, date(2024, 1, 3)) == 2


def test_current_streak_empty() -> None:
    assert current_streak([], date(2024, 1, 3)) == 0


def test_missed_days_counts_gaps_in_history() -> None:
    assert missed_days(_days("2024-01-01", "2024-01-03")) == 1
    assert missed_days(_days("2024-01-01", "2024-01-01", "2024-01-02")) == 0
    assert missed_days([]) == 0


@pytest.mark.parametrize("today_offset", [0, 1, 2, 5])
def test_longest_streak_never_below_current(today_offset: int) -> None:
    start = date(2024, 3, 1)
    dates = [start + timedelta(days=offset) for offset in (0, 1, 2, 4, 5, 9, 10, 11, 12)]
    today = dates[-1] + timedelta(days=today_offset)
    summary = summarize_streaks(dates, today=today)
    assert summary.longest >= summary.current
    assert summary.longest == 4


def test_summarize_streaks_returns_all_fields() -> None:
    dates = _days("2024-01-01", "2024-01-03", "2024-01-04")
    summary = summarize_streaks(dates, today=date(2024, 1, 5))
    assert summary == StreakSummary(current=2, longest=2, missed=1)
