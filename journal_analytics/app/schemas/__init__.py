from .analytics import (
    AnalyticsReport,
    AnalyticsRequest,
    MoodCatalogResponse,
    MoodDistribution,
    MoodGroup,
    MostFrequentMood,
    TagCatalogResponse,
)
from .entry import JournalEntry, Mood

__all__ = [
    "AnalyticsReport",
    "AnalyticsRequest",
    "JournalEntry",
    "Mood",
    "MoodCatalogResponse",
    "MoodDistribution",
    "MoodGroup",
    "MostFrequentMood",
    "TagCatalogResponse",
]
