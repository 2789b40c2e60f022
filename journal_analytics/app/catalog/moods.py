from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class MoodCategory(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


MOOD_CATALOG = MappingProxyType(
    {
        "Happy": MoodCategory.POSITIVE,
        "Excited": MoodCategory.POSITIVE,
        "Relaxed": MoodCategory.POSITIVE,
        "Grateful": MoodCategory.POSITIVE,
        "Confident": MoodCategory.POSITIVE,
        "Calm": MoodCategory.NEUTRAL,
        "Thoughtful": MoodCategory.NEUTRAL,
        "Curious": MoodCategory.NEUTRAL,
        "Nostalgic": MoodCategory.NEUTRAL,
        "Bored": MoodCategory.NEUTRAL,
        "Sad": MoodCategory.NEGATIVE,
        "Angry": MoodCategory.NEGATIVE,
        "Stressed": MoodCategory.NEGATIVE,
        "Lonely": MoodCategory.NEGATIVE,
        "Anxious": MoodCategory.NEGATIVE,
    }
)

_EMOJI = MappingProxyType(
    {
        MoodCategory.POSITIVE: "😊",
        MoodCategory.NEUTRAL: "😐",
        MoodCategory.NEGATIVE: "😔",
    }
)


def category_for(label: str) -> MoodCategory:
    """Resolve a mood label to its category; unknown labels count as neutral."""

    return MOOD_CATALOG.get(label.strip(), MoodCategory.NEUTRAL)


def moods_by_category(category: MoodCategory) -> list[str]:
    return [label for label, value in MOOD_CATALOG.items() if value is category]


def all_moods() -> list[str]:
    return list(MOOD_CATALOG)


def emoji_for(category: MoodCategory) -> str:
    return _EMOJI[category]
