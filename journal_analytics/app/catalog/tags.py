from __future__ import annotations

import re

_TAG_SPLIT_RE = re.compile(r"[,;]")

PREBUILT_TAGS: tuple[str, ...] = (
    # Career & work
    "Work",
    "Career",
    "Studies",
    "Projects",
    "Planning",
    # Relationships
    "Family",
    "Friends",
    "Relationships",
    "Parenting",
    # Health & wellness
    "Health",
    "Fitness",
    "Exercise",
    "Meditation",
    "Yoga",
    "Self-care",
    # Personal development
    "Personal Growth",
    "Reflection",
    "Spirituality",
    # Activities & hobbies
    "Hobbies",
    "Travel",
    "Nature",
    "Reading",
    "Writing",
    "Cooking",
    "Music",
    "Shopping",
    # Special occasions
    "Birthday",
    "Holiday",
    "Vacation",
    "Celebration",
    "Finance",
)


def prebuilt_tags() -> list[str]:
    return sorted(PREBUILT_TAGS)


def parse_tags(raw: str | None) -> list[str]:
    """Split a ``,``/``;`` delimited tag string into trimmed, non-empty tags."""

    if not raw:
        return []
    return [token.strip() for token in _TAG_SPLIT_RE.split(raw) if token.strip()]


def count_words(text: str | None) -> int:
    if not text:
        return 0
    return len(text.split())
