"""Streak, mood, tag and word-count analytics over journal entries."""

from .engine import AnalyticsEngine, InvalidArgumentError
from .streaks import StreakSummary, current_streak, longest_streak, missed_days, summarize_streaks
from .window import resolve_window

__all__ = [
    "AnalyticsEngine",
    "InvalidArgumentError",
    "StreakSummary",
    "current_streak",
    "longest_streak",
    "missed_days",
    "resolve_window",
    "summarize_streaks",
]
