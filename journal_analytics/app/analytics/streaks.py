from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from itertools import pairwise

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakSummary:
    current: int = 0
    longest: int = 0
    missed: int = 0


def longest_streak(entry_dates: Iterable[date]) -> int:
    sorted_dates = sorted(set(entry_dates))
    if not sorted_dates:
        return 0
    streak = 1
    longest = 1
    for previous, current in pairwise(sorted_dates):
        if current - previous == _ONE_DAY:
            streak += 1
            longest = max(longest, streak)
        else:
            streak = 1
    return longest


def current_streak(entry_dates: Iterable[date], today: date) -> int:
    """Count consecutive days with entries ending today.

    A day that has not finished yet does not break the streak: when today has
    no entry the walk starts from yesterday instead.
    """

    present = set(entry_dates)
    if not present:
        return 0
    yesterday = today - _ONE_DAY
    if max(present) < yesterday:
        return 0

    check = today if today in present else yesterday
    streak = 0
    while check in present:
        streak += 1
        check -= _ONE_DAY
    return streak


def missed_days(entry_dates: Iterable[date]) -> int:
    distinct = set(entry_dates)
    if not distinct:
        return 0
    span = (max(distinct) - min(distinct)).days + 1
    return span - len(distinct)


def summarize_streaks(entry_dates: Iterable[date], *, today: date) -> StreakSummary:
    distinct = frozenset(entry_dates)
    return StreakSummary(
        current=current_streak(distinct, today),
        longest=longest_streak(distinct),
        missed=missed_days(distinct),
    )
