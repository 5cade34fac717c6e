"""Aggregator configuration.

AggregatorConfig names the record fields that feed the aggregator and the
bucketing/error policy shared by all transforms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Width of one login-trend bucket in minutes.
DEFAULT_BUCKET_MINUTES = 5


@dataclass(frozen=True)
class AggregatorConfig:
    """Field mapping and policy for the login aggregator.

    Attributes:
        category_field: Record field holding the grouping key (company code).
        subject_field: Record field holding the opaque subject id (employee number).
        timestamp_field: Record field holding the textual timestamp.
        bucket_minutes: Width of a time bucket. The last bucket of an hour is
            clipped at minute 59.
        zero_pad_hour: If True, bucket keys use two-digit hours ("07:00–04"),
            which makes lexicographic order match clock order. Off by default.
        strict: If True, the first malformed timestamp aborts a transform.
            If False, malformed events are skipped and reported.
    """

    category_field: str = "company"
    subject_field: str = "employeeNo"
    timestamp_field: str = "timestamp"
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES
    zero_pad_hour: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        for name in ("category_field", "subject_field", "timestamp_field"):
            if not getattr(self, name):
                raise ValueError(f"{name} must be a non-empty string")
        if len({self.category_field, self.subject_field, self.timestamp_field}) != 3:
            raise ValueError("category_field, subject_field and timestamp_field must differ")
        if not 1 <= int(self.bucket_minutes) <= 60:
            raise ValueError(f"bucket_minutes must be in 1..60, got {self.bucket_minutes!r}")

    @property
    def reserved_fields(self) -> frozenset[str]:
        """Record fields consumed by LoginEvent (everything else is payload)."""
        return frozenset({self.category_field, self.subject_field, self.timestamp_field})

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_field": self.category_field,
            "subject_field": self.subject_field,
            "timestamp_field": self.timestamp_field,
            "bucket_minutes": self.bucket_minutes,
            "zero_pad_hour": self.zero_pad_hour,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AggregatorConfig":
        """Build a config from a dict, ignoring unknown keys and filling defaults."""
        defaults = cls()
        return cls(
            category_field=str(data.get("category_field", defaults.category_field)),
            subject_field=str(data.get("subject_field", defaults.subject_field)),
            timestamp_field=str(data.get("timestamp_field", defaults.timestamp_field)),
            bucket_minutes=int(data.get("bucket_minutes", defaults.bucket_minutes)),
            zero_pad_hour=bool(data.get("zero_pad_hour", defaults.zero_pad_hour)),
            strict=bool(data.get("strict", defaults.strict)),
        )
