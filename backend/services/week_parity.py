from __future__ import annotations

from datetime import date


def week_offset(anchor: date, today: date) -> int:
    return ((today - anchor).days // 7) % 2


def week_key_for(anchor: date | str, today: date) -> str:
    """Label the calendar week containing `today` as week1 or week2.

    `anchor` is the Sunday that starts a week1. Used for display only.
    """

    if isinstance(anchor, str):
        anchor = date.fromisoformat(anchor)
    return "week1" if week_offset(anchor, today) == 0 else "week2"
