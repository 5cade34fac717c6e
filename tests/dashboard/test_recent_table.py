"""Unit tests for recent logins table rows."""

from __future__ import annotations

from logindash.aggregator.transforms import order_by_recency
from logindash.dashboard.recent_table import RECENT_COLUMNS, recent_columns, recent_login_rows


def test_rows_follow_recency_order(sample_events):
    recent = order_by_recency(sample_events).events
    rows = recent_login_rows(recent)
    assert [r["subject_id"] for r in rows[:2]] == ["90004", "90003"]
    assert rows[0] == {
        "row_key": "1250101532977-0",
        "time": "07:13:45",
        "subject_id": "90004",
        "category": "5678",
        "accuracy": "20%",
        "user_id": "1250101532977",
    }


def test_rows_limit(sample_events):
    recent = order_by_recency(sample_events).events
    assert len(recent_login_rows(recent, limit=3)) == 3


def test_rows_without_optional_payload(make_event):
    rows = recent_login_rows([make_event("A", "2025-07-08T10:00:00+07:00", subject_id="e1")])
    assert rows[0]["accuracy"] == ""
    assert rows[0]["user_id"] == ""
    assert rows[0]["row_key"] == "e1-0"


def test_row_keys_unique_for_duplicate_subjects(make_event):
    ts = "2025-07-08T10:00:00+07:00"
    rows = recent_login_rows([make_event("A", ts, subject_id="x"), make_event("A", ts, subject_id="x")])
    assert len({r["row_key"] for r in rows}) == 2


def test_columns_are_copies():
    cols = recent_columns()
    cols[0]["label"] = "changed"
    assert RECENT_COLUMNS[0]["label"] != "changed"
    assert [c["field"] for c in cols] == ["time", "subject_id", "category", "accuracy", "user_id"]
