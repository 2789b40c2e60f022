from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from ..catalog import MoodCategory
from .entry import JournalEntry


class MoodDistribution(BaseModel):
    positive_count: int = Field(default=0, ge=0)
    neutral_count: int = Field(default=0, ge=0)
    negative_count: int = Field(default=0, ge=0)
    positive_percentage: float = 0.0
    neutral_percentage: float = 0.0
    negative_percentage: float = 0.0
    total_occurrences: int = Field(default=0, ge=0)


class MostFrequentMood(BaseModel):
    label: str = Field(..., min_length=1)
    count: int = Field(..., ge=1)


class AnalyticsReport(BaseModel):
    total_entries: int = 0
    first_entry_date: date | None = None
    last_entry_date: date | None = None
    window_start: date | None = None
    window_end: date | None = None
    mood_distribution: MoodDistribution = Field(default_factory=MoodDistribution)
    most_frequent_mood: MostFrequentMood | None = None
    current_streak: int = 0
    longest_streak: int = 0
    missed_days: int = 0
    tag_usage_count: dict[str, int] = Field(default_factory=dict)
    tag_percentage: dict[str, float] = Field(default_factory=dict)
    total_word_count: int = 0
    average_word_count: float = 0.0
    daily_word_counts: dict[date, int] = Field(default_factory=dict)


class AnalyticsRequest(BaseModel):
    entries: list[JournalEntry]
    start_date: date | None = None
    end_date: date | None = None
    range: Literal["7d", "30d", "all"] | None = None

    @model_validator(mode="after")
    def _check_window(self) -> AnalyticsRequest:
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class MoodGroup(BaseModel):
    category: MoodCategory
    emoji: str
    moods: list[str]


class MoodCatalogResponse(BaseModel):
    items: list[MoodGroup]


class TagCatalogResponse(BaseModel):
    items: list[str]
