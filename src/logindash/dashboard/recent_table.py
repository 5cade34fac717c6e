"""Row and column definitions for the recent logins table."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from logindash.aggregator.events import LoginEvent
from logindash.aggregator.timestamps import parse_timestamp

# Payload keys shown in the table when present.
ACCURACY_KEY = "accuracy"
USER_ID_KEY = "userId"

RECENT_COLUMNS: list[dict[str, Any]] = [
    {"name": "time", "label": "Login time", "field": "time", "align": "left"},
    {"name": "subject_id", "label": "Employee no.", "field": "subject_id", "align": "left"},
    {"name": "category", "label": "Company", "field": "category", "align": "left"},
    {"name": "accuracy", "label": "Accuracy", "field": "accuracy", "align": "right"},
    {"name": "user_id", "label": "User ID", "field": "user_id", "align": "left"},
]


def recent_login_rows(
    events: Sequence[LoginEvent],
    *,
    limit: Optional[int] = None,
) -> list[dict[str, Any]]:
    """Build table rows for events that are already in recency order.

    The time column is the event's own wall clock (HH:MM:SS). Each row gets a
    positional "row_key" so duplicate user ids stay distinct.
    """
    shown = events if limit is None else events[:limit]
    rows = []
    for i, event in enumerate(shown):
        accuracy = event.payload.get(ACCURACY_KEY)
        rows.append(
            {
                "row_key": f"{event.payload.get(USER_ID_KEY, event.subject_id)}-{i}",
                "time": parse_timestamp(event.timestamp).strftime("%H:%M:%S"),
                "subject_id": event.subject_id,
                "category": event.category,
                "accuracy": "" if accuracy is None else f"{accuracy}%",
                "user_id": str(event.payload.get(USER_ID_KEY, "")),
            }
        )
    return rows


def recent_columns() -> list[dict[str, Any]]:
    """Fresh copy of the ui.table column defs."""
    return [dict(c) for c in RECENT_COLUMNS]
