"""Unit tests for timestamp parsing and bucket-key helpers."""

from __future__ import annotations

from datetime import timedelta, timezone

import pytest

from logindash.aggregator.events import MalformedTimestamp
from logindash.aggregator.timestamps import (
    bucket_end,
    bucket_key_for,
    bucket_start,
    format_bucket_key,
    parse_timestamp,
)


def test_parse_export_format_keeps_wall_clock_and_offset():
    """Export format keeps hour/minute as written and attaches the UTC+7 offset."""
    dt = parse_timestamp("July 8, 2025 at 7:03:02 AM UTC+7")
    assert (dt.year, dt.month, dt.day) == (2025, 7, 8)
    assert (dt.hour, dt.minute, dt.second) == (7, 3, 2)
    assert dt.utcoffset() == timedelta(hours=7)


@pytest.mark.parametrize(
    "text,hour",
    [
        ("July 8, 2025 at 12:15:00 AM UTC+7", 0),
        ("July 8, 2025 at 12:15:00 PM UTC+7", 12),
        ("July 8, 2025 at 1:15:00 PM UTC+7", 13),
        ("Jul 8, 2025 at 11:15 pm UTC", 23),
    ],
)
def test_parse_export_format_12_hour_clock(text, hour):
    """AM/PM converts to a 24-hour wall clock."""
    assert parse_timestamp(text).hour == hour


@pytest.mark.parametrize(
    "suffix,offset",
    [
        ("UTC+7", timedelta(hours=7)),
        ("UTC+07:00", timedelta(hours=7)),
        ("UTC+0530", timedelta(hours=5, minutes=30)),
        ("GMT-3", timedelta(hours=-3)),
        ("UTC", timedelta(0)),
    ],
)
def test_parse_export_format_offsets(suffix, offset):
    dt = parse_timestamp(f"July 8, 2025 at 7:03:02 AM {suffix}")
    assert dt.utcoffset() == offset
    assert dt.hour == 7


def test_parse_iso_keeps_offset():
    dt = parse_timestamp("2025-07-08T07:03:02+07:00")
    assert (dt.hour, dt.minute) == (7, 3)
    assert dt.utcoffset() == timedelta(hours=7)


def test_parse_iso_z_suffix_is_utc():
    dt = parse_timestamp("2025-07-08T07:03:02Z")
    assert dt.tzinfo is not None
    assert dt.utcoffset() == timedelta(0)


def test_parse_naive_iso_is_taken_as_utc_without_shifting():
    """Naive ISO gets the UTC offset attached; wall clock is unchanged."""
    dt = parse_timestamp("2025-07-08 10:00:00")
    assert dt.tzinfo == timezone.utc
    assert dt.hour == 10


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "not a date",
        "Smarch 8, 2025 at 7:03:02 AM UTC+7",
        "July 31, 2025 at 13:03:02 PM UTC+7",
        "June 31, 2025 at 7:03:02 AM UTC+7",
        "July 8, 2025 at 7:03:02 AM UTC+25",
        "2025-13-01T00:00:00",
        None,
        12345,
    ],
)
def test_parse_malformed_raises(text):
    with pytest.raises(MalformedTimestamp) as exc_info:
        parse_timestamp(text)
    assert exc_info.value.text == text


def test_malformed_timestamp_is_value_error():
    with pytest.raises(ValueError):
        parse_timestamp("garbage")


@pytest.mark.parametrize(
    "minute,start,end",
    [(0, 0, 4), (3, 0, 4), (4, 0, 4), (5, 5, 9), (7, 5, 9), (54, 50, 54), (55, 55, 59), (59, 55, 59)],
)
def test_bucket_start_and_end(minute, start, end):
    assert bucket_start(minute) == start
    assert bucket_end(start) == end


def test_bucket_end_is_clipped_within_the_hour():
    """A wide last bucket never runs past minute 59."""
    assert bucket_start(58, width=7) == 56
    assert bucket_end(56, width=7) == 59


def test_format_bucket_key_unpadded_hour():
    assert format_bucket_key(7, 0, 4) == "7:00–04"
    assert format_bucket_key(10, 55, 59) == "10:55–59"


def test_format_bucket_key_zero_padded_hour():
    assert format_bucket_key(7, 5, 9, zero_pad_hour=True) == "07:05–09"


def test_bucket_key_for_uses_written_wall_clock():
    """Bucketing happens in the event's own zone, not UTC."""
    dt = parse_timestamp("July 8, 2025 at 7:03:02 AM UTC+7")
    assert bucket_key_for(dt) == "7:00–04"
