"""Immutable data types consumed and produced by the login aggregator.

LoginEvent is the single input type. CategoryCount, TimeBucket, SkippedEvent
and the result wrappers are derived, recomputed from the input every cycle
and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from logindash.aggregator.config import AggregatorConfig


class MalformedTimestamp(ValueError):
    """An event timestamp could not be parsed into a valid instant."""

    def __init__(self, text: Any, detail: Optional[str] = None) -> None:
        self.text = text
        msg = f"Malformed timestamp: {text!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


def _freeze(payload: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(payload or {}))


@dataclass(frozen=True)
class LoginEvent:
    """One login/location record.

    Attributes:
        category: Grouping key (company code). Kept as text so "0999" stays "0999".
        subject_id: Opaque subject identifier (employee number).
        timestamp: Textual point in time, parsed lazily by the transforms.
        payload: Read-only passthrough attributes (accuracy, coordinates, user id).
    """

    category: str
    subject_id: str
    timestamp: str
    payload: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.category, str) or not self.category:
            raise ValueError(f"category must be a non-empty string, got {self.category!r}")
        if not isinstance(self.subject_id, str) or not self.subject_id:
            raise ValueError(f"subject_id must be a non-empty string, got {self.subject_id!r}")
        object.__setattr__(self, "payload", _freeze(self.payload))

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        config: Optional[AggregatorConfig] = None,
    ) -> "LoginEvent":
        """Build an event from a flat record dict.

        Fields named by the config become category/subject_id/timestamp; all
        other keys go to payload unchanged. A missing timestamp is kept as an
        empty string so the transforms report it as malformed.

        Raises:
            ValueError: If the category or subject field is missing or empty.
        """
        cfg = config or AggregatorConfig()
        category = record.get(cfg.category_field)
        subject = record.get(cfg.subject_field)
        if category is None or str(category) == "":
            raise ValueError(f"record is missing required field {cfg.category_field!r}")
        if subject is None or str(subject) == "":
            raise ValueError(f"record is missing required field {cfg.subject_field!r}")
        raw_ts = record.get(cfg.timestamp_field)
        payload = {k: v for k, v in record.items() if k not in cfg.reserved_fields}
        return cls(
            category=str(category),
            subject_id=str(subject),
            timestamp="" if raw_ts is None else str(raw_ts),
            payload=payload,
        )

    def to_record(self, config: Optional[AggregatorConfig] = None) -> dict[str, Any]:
        """Flatten back into a record dict using the config's field names."""
        cfg = config or AggregatorConfig()
        record = dict(self.payload)
        record[cfg.category_field] = self.category
        record[cfg.subject_field] = self.subject_id
        record[cfg.timestamp_field] = self.timestamp
        return record


@dataclass(frozen=True)
class CategoryCount:
    """Number of events sharing one category."""

    category: str
    count: int


@dataclass(frozen=True)
class TimeBucket:
    """Number of events whose timestamp falls in one [start, end] minute window of an hour."""

    bucket_key: str
    count: int
    hour: int
    start_minute: int
    end_minute: int


@dataclass(frozen=True)
class SkippedEvent:
    """An input event dropped from a transform, with its input position and why."""

    index: int
    event: LoginEvent
    reason: str


@dataclass(frozen=True)
class BucketResult:
    """Output of bucket_by_time."""

    buckets: tuple[TimeBucket, ...] = ()
    skipped: tuple[SkippedEvent, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


@dataclass(frozen=True)
class RecencyResult:
    """Output of order_by_recency."""

    events: tuple[LoginEvent, ...] = ()
    skipped: tuple[SkippedEvent, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
