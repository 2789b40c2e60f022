from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Callable, Sequence
from datetime import date

from ..catalog import MoodCategory
from ..metrics import REPORT_ENTRIES, REPORTS_COMPUTED
from ..schemas.analytics import AnalyticsReport, MoodDistribution, MostFrequentMood
from ..schemas.entry import JournalEntry
from .streaks import summarize_streaks
from .window import window_label

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when the engine is called in violation of its input contract."""


def _percentage(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(count / total * 100, 2)


def _in_window(value: date, start: date | None, end: date | None) -> bool:
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


class AnalyticsEngine:
    """Compute journal analytics over an in-memory snapshot of entries.

    The engine holds no state between calls. ``clock`` supplies "today" for
    the current-streak rule and defaults to the local calendar date.
    """

    def __init__(self, *, clock: Callable[[], date] | None = None) -> None:
        self._clock = clock or date.today

    def compute(
        self,
        entries: Sequence[JournalEntry] | None,
        date_range_start: date | None = None,
        date_range_end: date | None = None,
    ) -> AnalyticsReport:
        if entries is None:
            raise InvalidArgumentError("entries must be a sequence of journal entries, not None")

        history = tuple(entries)
        windowed = [
            entry
            for entry in history
            if _in_window(entry.entry_date, date_range_start, date_range_end)
        ]
        REPORTS_COMPUTED.labels(window=window_label(date_range_start, date_range_end)).inc()
        REPORT_ENTRIES.observe(len(windowed))

        if not windowed:
            logger.debug(
                "analytics window empty",
                extra={"extra_fields": {"history_entries": len(history)}},
            )
            return AnalyticsReport(window_start=date_range_start, window_end=date_range_end)

        streaks = summarize_streaks(
            (entry.entry_date for entry in history),
            today=self._clock(),
        )
        total_words = sum(entry.word_count for entry in windowed)
        tag_usage, tag_percentage = self._tag_analytics(windowed)

        report = AnalyticsReport(
            total_entries=len(windowed),
            first_entry_date=min(entry.entry_date for entry in windowed),
            last_entry_date=max(entry.entry_date for entry in windowed),
            window_start=date_range_start,
            window_end=date_range_end,
            mood_distribution=self._mood_distribution(windowed),
            most_frequent_mood=self._most_frequent_mood(windowed),
            current_streak=streaks.current,
            longest_streak=streaks.longest,
            missed_days=streaks.missed,
            tag_usage_count=tag_usage,
            tag_percentage=tag_percentage,
            total_word_count=total_words,
            average_word_count=round(total_words / len(windowed), 2),
            daily_word_counts=self._daily_word_counts(windowed),
        )
        logger.debug(
            "analytics computed",
            extra={
                "extra_fields": {
                    "history_entries": len(history),
                    "window_entries": report.total_entries,
                    "current_streak": report.current_streak,
                }
            },
        )
        return report

    @staticmethod
    def _mood_distribution(entries: Sequence[JournalEntry]) -> MoodDistribution:
        categories = Counter(mood.category for entry in entries for mood in entry.moods)
        total = sum(categories.values())
        positive = categories.get(MoodCategory.POSITIVE, 0)
        neutral = categories.get(MoodCategory.NEUTRAL, 0)
        negative = categories.get(MoodCategory.NEGATIVE, 0)
        return MoodDistribution(
            positive_count=positive,
            neutral_count=neutral,
            negative_count=negative,
            positive_percentage=_percentage(positive, total),
            neutral_percentage=_percentage(neutral, total),
            negative_percentage=_percentage(negative, total),
            total_occurrences=total,
        )

    @staticmethod
    def _most_frequent_mood(entries: Sequence[JournalEntry]) -> MostFrequentMood | None:
        # Counter keeps first-seen order, so ties go to the earliest label.
        counter = Counter(entry.primary_mood.label for entry in entries)
        if not counter:
            return None
        label, count = counter.most_common(1)[0]
        return MostFrequentMood(label=label, count=count)

    @staticmethod
    def _tag_analytics(
        entries: Sequence[JournalEntry],
    ) -> tuple[dict[str, int], dict[str, float]]:
        counter = Counter(tag for entry in entries for tag in entry.tags)
        if not counter:
            return {}, {}
        total = sum(counter.values())
        usage = dict(counter.most_common())
        percentages = {tag: _percentage(count, total) for tag, count in usage.items()}
        return usage, percentages

    @staticmethod
    def _daily_word_counts(entries: Sequence[JournalEntry]) -> dict[date, int]:
        daily: defaultdict[date, int] = defaultdict(int)
        for entry in entries:
            daily[entry.entry_date] += entry.word_count
        return dict(sorted(daily.items()))
