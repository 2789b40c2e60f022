from __future__ import annotations

from datetime import date, timedelta

_PRESET_DAYS = {"7d": 7, "30d": 30}


def resolve_window(
    start: date | None,
    end: date | None,
    preset: str | None,
    *,
    today: date,
) -> tuple[date | None, date | None]:
    """Turn explicit bounds or a range preset into an inclusive date window.

    Explicit bounds always win; a preset only applies when neither bound is
    given. ``"all"`` and unknown presets leave the window unbounded.
    """

    if start is not None or end is not None:
        return start, end
    days = _PRESET_DAYS.get(preset or "")
    if days is None:
        return None, None
    return today - timedelta(days=days), today


def window_label(start: date | None, end: date | None) -> str:
    if start is None and end is None:
        return "all"
    if start is None or end is None:
        return "open"
    return "bounded"
