"""Unit tests for dataset loading and tabular views."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from logindash.aggregator.config import AggregatorConfig
from logindash.aggregator.summary import summarize
from logindash.dataset import (
    category_counts_frame,
    events_from_frame,
    events_to_frame,
    load_events,
    load_events_csv,
    load_events_json,
    time_buckets_frame,
)

SAMPLE_CSV = Path(__file__).resolve().parents[1] / "data" / "login_events_sample.csv"


@pytest.fixture
def csv_path(tmp_path, sample_records) -> Path:
    path = tmp_path / "events.csv"
    pd.DataFrame(sample_records).to_csv(path, index=False)
    return path


@pytest.fixture
def json_path(tmp_path, sample_records) -> Path:
    path = tmp_path / "events.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


def test_load_events_csv_keeps_leading_zeros(csv_path):
    events = load_events_csv(csv_path)
    assert len(events) == 10
    assert events[0].category == "0999"
    assert events[0].subject_id == "67217"
    assert events[0].timestamp == "July 8, 2025 at 7:03:02 AM UTC+7"


def test_load_events_csv_payload_passthrough(csv_path):
    event = load_events_csv(csv_path)[0]
    assert event.payload["accuracy"] == 20
    assert event.payload["latitude"] == pytest.approx(13.7091284)
    assert str(event.payload["userId"]) == "1250101530974"


def test_load_events_json(json_path, sample_records):
    events = load_events_json(json_path)
    assert [e.category for e in events] == [r["company"] for r in sample_records]
    assert events[-1].timestamp == sample_records[-1]["timestamp"]


def test_load_events_json_empty_array(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    assert load_events_json(path) == []


def test_load_events_dispatches_on_suffix(csv_path, json_path):
    assert len(load_events(csv_path)) == 10
    assert len(load_events(json_path)) == 10


def test_load_events_unsupported_suffix(tmp_path):
    path = tmp_path / "events.xlsx"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError) as exc_info:
        load_events(path)
    assert "xlsx" in str(exc_info.value)


def test_load_events_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_events_csv(tmp_path / "nope.csv")
    with pytest.raises(FileNotFoundError):
        load_events_json(tmp_path / "nope.json")


def test_load_events_missing_column_raises(tmp_path):
    path = tmp_path / "events.csv"
    pd.DataFrame({"company": ["A"], "timestamp": ["x"]}).to_csv(path, index=False)
    with pytest.raises(ValueError) as exc_info:
        load_events_csv(path)
    assert "employeeNo" in str(exc_info.value)


def test_events_from_frame_missing_timestamp_cell_is_reported_later():
    df = pd.DataFrame(
        {
            "company": ["A", "B"],
            "employeeNo": ["1", "2"],
            "timestamp": ["2025-07-08T07:00:00+07:00", None],
        }
    )
    events = events_from_frame(df)
    assert events[1].timestamp == ""
    assert summarize(events).skipped_count == 1


def test_events_from_frame_missing_category_names_row():
    df = pd.DataFrame({"company": ["A", None], "employeeNo": ["1", "2"], "timestamp": ["t", "t"]})
    with pytest.raises(ValueError) as exc_info:
        events_from_frame(df)
    assert "row 1" in str(exc_info.value)


def test_events_to_frame_round_trip(sample_events):
    df = events_to_frame(sample_events)
    assert list(df["company"]) == [e.category for e in sample_events]
    assert events_from_frame(df) == sample_events


def test_events_to_frame_empty_has_required_columns():
    cfg = AggregatorConfig()
    df = events_to_frame([], config=cfg)
    assert list(df.columns) == ["company", "employeeNo", "timestamp"]
    assert df.empty


def test_chart_frames(sample_events):
    summary = summarize(sample_events)
    cats = category_counts_frame(summary.categories)
    assert list(cats.columns) == ["company", "value"]
    assert cats.to_dict(orient="records") == [
        {"company": "5678", "value": 4},
        {"company": "0999", "value": 3},
        {"company": "1234", "value": 3},
    ]
    trend = time_buckets_frame(summary.buckets)
    assert list(trend.columns) == ["time", "count"]
    assert list(trend["time"]) == ["7:00–04", "7:05–09", "7:10–14"]
    assert list(trend["count"]) == [2, 5, 3]


def test_bundled_sample_file_loads():
    events = load_events(SAMPLE_CSV)
    summary = summarize(events)
    assert summary.stats.total_count == 10
    assert summary.skipped == ()
    assert {c.category for c in summary.categories} == {"0999", "1234", "5678"}
