from services.override_store import OverrideStore
from solver.slot_builder import build_slots
from tests.factories import fixed_days, row, template

KEY = "Monday_12:00_13:00"


def _free_days(overrides: dict[str, bool]) -> list[str]:
    t = template(row("12:00", "13:00", fixed_days("Lunch")))
    return [s.day for s in build_slots(t, overrides)]


def test_toggle_adds_then_removes():
    store = OverrideStore()
    once = store.toggle("week1", KEY)
    assert once.for_week("week1") == {KEY: True}
    twice = once.toggle("week1", KEY)
    assert twice.for_week("week1") == {}


def test_toggle_twice_restores_classification():
    store = OverrideStore()
    assert _free_days(store.for_week("week1")) == []
    assert _free_days(store.toggle("week1", KEY).for_week("week1")) == ["Monday"]
    assert _free_days(store.toggle("week1", KEY).toggle("week1", KEY).for_week("week1")) == []


def test_weeks_are_independent():
    store = OverrideStore().toggle("week1", KEY)
    assert store.is_forced_free("week1", KEY)
    assert not store.is_forced_free("week2", KEY)
    assert _free_days(store.for_week("week2")) == []


def test_toggle_returns_new_store():
    store = OverrideStore()
    store.toggle("week2", KEY)
    assert store.to_dict() == {"week1": {}, "week2": {}}


def test_from_maps_drops_false_flags():
    store = OverrideStore.from_maps({KEY: True, "Sunday_08:00_09:00": False}, None)
    assert store.to_dict() == {"week1": {KEY: True}, "week2": {}}


def test_for_week_returns_a_copy():
    store = OverrideStore().toggle("week1", KEY)
    bag = store.for_week("week1")
    bag.clear()
    assert store.for_week("week1") == {KEY: True}
