from datetime import date

from services.week_parity import week_key_for


def test_anchor_week_is_week1():
    anchor = date(2026, 1, 4)
    assert week_key_for(anchor, date(2026, 1, 4)) == "week1"
    assert week_key_for(anchor, date(2026, 1, 10)) == "week1"


def test_following_week_is_week2_and_cycle_repeats():
    anchor = date(2026, 1, 4)
    assert week_key_for(anchor, date(2026, 1, 11)) == "week2"
    assert week_key_for(anchor, date(2026, 1, 17)) == "week2"
    assert week_key_for(anchor, date(2026, 1, 18)) == "week1"


def test_dates_before_anchor_follow_floor_division():
    anchor = date(2026, 1, 4)
    assert week_key_for(anchor, date(2026, 1, 3)) == "week2"
    assert week_key_for(anchor, date(2025, 12, 27)) == "week1"


def test_anchor_may_be_an_iso_string():
    assert week_key_for("2026-01-04", date(2026, 10, 18)) == "week2"
