from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..catalog import MoodCategory, category_for, count_words, parse_tags


class Mood(BaseModel):
    """A mood label with its category; bare labels resolve through the catalog."""

    model_config = ConfigDict(frozen=True, from_attributes=True, str_strip_whitespace=True)

    label: str = Field(..., min_length=1, max_length=50)
    category: MoodCategory

    @model_validator(mode="before")
    @classmethod
    def _resolve_category(cls, data: Any) -> Any:
        if isinstance(data, str):
            data = {"label": data}
        if isinstance(data, dict) and data.get("category") is None and data.get("label"):
            data = {**data, "category": category_for(str(data["label"]))}
        return data


def _is_blank_mood(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, dict):
        return not str(value.get("label") or "").strip()
    return False


class JournalEntry(BaseModel):
    """One journal entry as handed to the analytics engine.

    Tags and word counts are normalized here, once, so the engine never
    re-parses raw strings.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int | str
    entry_date: date
    content: str = ""
    primary_mood: Mood
    secondary_moods: tuple[Mood, ...] = Field(default=(), max_length=2)
    tags: tuple[str, ...] = ()
    word_count: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _derive_word_count(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("word_count") is None:
            data = {**data, "word_count": count_words(data.get("content"))}
        return data

    @field_validator("entry_date", mode="before")
    @classmethod
    def _normalize_entry_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value.strip()) > 10:
            return datetime.fromisoformat(value.strip()).date()
        return value

    @field_validator("secondary_moods", mode="before")
    @classmethod
    def _drop_blank_moods(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (str, dict, Mood)):
            value = [value]
        return tuple(item for item in value if not _is_blank_mood(item))

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: str | Iterable[str] | None) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(parse_tags(value))
        return tuple(tag.strip() for tag in value if tag and tag.strip())

    @property
    def moods(self) -> tuple[Mood, ...]:
        return (self.primary_mood, *self.secondary_moods)
