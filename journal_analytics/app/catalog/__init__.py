"""Static mood and tag definitions shared by the schemas and the API."""

from .moods import (
    MOOD_CATALOG,
    MoodCategory,
    all_moods,
    category_for,
    emoji_for,
    moods_by_category,
)
from .tags import PREBUILT_TAGS, count_words, parse_tags, prebuilt_tags

__all__ = [
    "MOOD_CATALOG",
    "PREBUILT_TAGS",
    "MoodCategory",
    "all_moods",
    "category_for",
    "count_words",
    "emoji_for",
    "moods_by_category",
    "parse_tags",
    "prebuilt_tags",
]
