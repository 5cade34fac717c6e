"""Shared fixtures for logindash tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure logindash package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_records() -> list[dict]:
    """Ten check-ins across three companies, one per minute-ish around 7:03-7:13 UTC+7."""
    rows = [
        ("0999", "67217", "7:03:02", "1250101530974"),
        ("0999", "67218", "7:04:15", "1250101530975"),
        ("0999", "67219", "7:05:47", "1250101530976"),
        ("1234", "80001", "7:06:10", "1250101531974"),
        ("1234", "80002", "7:07:28", "1250101531975"),
        ("1234", "80003", "7:08:40", "1250101531976"),
        ("5678", "90001", "7:09:12", "1250101532974"),
        ("5678", "90002", "7:10:55", "1250101532975"),
        ("5678", "90003", "7:12:20", "1250101532976"),
        ("5678", "90004", "7:13:45", "1250101532977"),
    ]
    return [
        {
            "accuracy": 20,
            "company": company,
            "employeeNo": employee,
            "latitude": 13.7091284,
            "longitude": 100.8615894,
            "timestamp": f"July 8, 2025 at {clock} AM UTC+7",
            "userId": user_id,
        }
        for company, employee, clock, user_id in rows
    ]


@pytest.fixture
def sample_events(sample_records):
    from logindash.aggregator.events import LoginEvent

    return [LoginEvent.from_record(r) for r in sample_records]


@pytest.fixture
def make_event():
    """Factory for minimal events: make_event("A", "2025-07-08T07:03:00+07:00")."""
    from logindash.aggregator.events import LoginEvent

    counter = {"n": 0}

    def _make(category: str, timestamp: str, subject_id: str | None = None) -> LoginEvent:
        counter["n"] += 1
        return LoginEvent(
            category=category,
            subject_id=subject_id or f"s{counter['n']}",
            timestamp=timestamp,
        )

    return _make
