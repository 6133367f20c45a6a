"""Rows are dated from Date/Timestamp, typed, and sorted."""
import logging

from betterme.ingestion.normalize import build_entry, entry_date, normalize_rows


def test_entry_date_prefers_date_over_timestamps():
    row = {"Date": "2026-01-05", "Timestamp": "1/1/2026 10:00:00", "timestamp": "1/2/2026"}
    assert entry_date(row) == "2026-01-05"


def test_entry_date_falls_back_in_order():
    assert entry_date({"Date": "", "Timestamp": "1/7/2026 8:00:00"}) == "2026-01-07"
    assert entry_date({"timestamp": "2026-01-08T07:00:00"}) == "2026-01-08"
    assert entry_date({"Notes": "no date"}) == ""


def test_build_entry_coerces_known_columns_and_keeps_extras():
    row = {
        "Date": "2026-01-01",
        "Timestamp": "1/1/2026 9:00:00",
        "SleepHours": "7.5",
        "Steps": "oops",
        "ShippedYN": "1",
        "Mood": "good",
    }
    entry = build_entry(row, "2026-01-01")

    assert entry.date == "2026-01-01"
    assert entry.sleep_hours == 7.5
    assert entry.steps == 0
    assert entry.shipped == 1
    assert entry.deep_work_minutes == 0
    assert entry.extras == {"Timestamp": "1/1/2026 9:00:00", "Mood": "good"}


def test_normalize_drops_undateable_rows_and_sorts(caplog):
    rows = [
        {"Date": "1/3/2026", "Steps": "3"},
        {"Date": "", "Steps": "99"},
        {"Date": "not a date", "Steps": "98"},
        {"Date": "2026-01-01", "Steps": "1"},
        {"Timestamp": "1/2/2026 23:59:59", "Steps": "2"},
    ]

    caplog.set_level(logging.WARNING)
    entries = normalize_rows(rows)

    assert [entry.date for entry in entries] == ["2026-01-01", "2026-01-02", "2026-01-03"]
    assert [entry.steps for entry in entries] == [1, 2, 3]
    assert "Dropped 2 rows" in caplog.text


def test_normalize_keeps_input_order_for_equal_dates():
    rows = [
        {"Date": "2026-01-01", "Steps": "1"},
        {"Date": "1/1/2026", "Steps": "2"},
    ]
    assert [entry.steps for entry in normalize_rows(rows)] == [1, 2]


def test_normalize_empty_input():
    assert normalize_rows([]) == []
