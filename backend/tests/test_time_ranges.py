from solver.time_ranges import parse_range, slot_key, to_hhmm, to_minutes


def test_parse_range_minutes_and_duration():
    r = parse_range("08:00-09:00")
    assert r is not None
    assert r.start_min == 480
    assert r.end_min == 540
    assert r.minutes == 60


def test_parse_range_rejects_malformed_input():
    assert parse_range("") is None
    assert parse_range(None) is None
    assert parse_range("08:00") is None
    assert parse_range("08:00-") is None
    assert parse_range("08:00-09:00-10:00") is None
    assert parse_range("8am-9am") is None
    assert parse_range("08:75-09:00") is None


def test_parse_range_keeps_non_positive_ranges_for_caller_to_judge():
    r = parse_range("10:00-09:00")
    assert r is not None
    assert r.minutes == -60


def test_minute_conversions():
    assert to_minutes("00:00") == 0
    assert to_minutes("23:59") == 1439
    assert to_minutes("24:00") == 1440
    assert to_minutes("24:30") is None
    assert to_hhmm(570) == "09:30"
    assert to_hhmm(5) == "00:05"


def test_slot_key_format():
    assert slot_key("Sunday", "08:00", "09:00") == "Sunday_08:00_09:00"
