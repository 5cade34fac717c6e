"""Pure transforms over a login event collection.

Each transform takes the full event sequence and returns a fresh immutable
result; none depends on another's output. Malformed timestamps are skipped
and reported in the result unless the config is strict.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Iterable, Optional, Sequence

from logindash.aggregator.config import AggregatorConfig
from logindash.aggregator.events import (
    BucketResult,
    CategoryCount,
    LoginEvent,
    MalformedTimestamp,
    RecencyResult,
    SkippedEvent,
    TimeBucket,
)
from logindash.aggregator.timestamps import bucket_end, bucket_start, format_bucket_key, parse_timestamp
from logindash.utils.logging import get_logger

logger = get_logger(__name__)


def _parse_all(
    events: Sequence[LoginEvent],
    cfg: AggregatorConfig,
) -> tuple[list[tuple[int, LoginEvent, datetime]], list[SkippedEvent]]:
    """Parse every timestamp once, splitting parsed entries from skipped ones.

    Raises:
        MalformedTimestamp: Only when cfg.strict is set.
    """
    parsed: list[tuple[int, LoginEvent, datetime]] = []
    skipped: list[SkippedEvent] = []
    for index, event in enumerate(events):
        try:
            dt = parse_timestamp(event.timestamp)
        except MalformedTimestamp as e:
            if cfg.strict:
                raise
            logger.warning(
                "Skipping event %d (subject %s): %s", index, event.subject_id, e
            )
            skipped.append(SkippedEvent(index=index, event=event, reason=str(e)))
            continue
        parsed.append((index, event, dt))
    return parsed, skipped


def group_by_category(events: Iterable[LoginEvent]) -> tuple[CategoryCount, ...]:
    """Tally events per category, most frequent first.

    Ties keep the order in which each category first appears in the input.

    Args:
        events: Login events (may be empty).

    Returns:
        Tuple of CategoryCount sorted by count descending.
    """
    counts: Counter[str] = Counter()
    for event in events:
        counts[event.category] += 1
    # Counter preserves first-insertion order and sorted() is stable.
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return tuple(CategoryCount(category=c, count=n) for c, n in ordered)


def bucket_by_time(
    events: Sequence[LoginEvent],
    *,
    config: Optional[AggregatorConfig] = None,
) -> BucketResult:
    """Histogram events into fixed-width minute buckets within each hour.

    Keys are sorted with plain string comparison, so with unpadded hours
    "10:00–04" sorts before "7:00–04".

    Args:
        events: Login events.
        config: Bucket width, hour padding and malformed-timestamp policy.

    Returns:
        BucketResult with buckets sorted by key and any skipped events.

    Raises:
        MalformedTimestamp: If config.strict and a timestamp cannot be parsed.
    """
    cfg = config or AggregatorConfig()
    width = cfg.bucket_minutes
    parsed, skipped = _parse_all(events, cfg)

    counts: dict[str, int] = {}
    windows: dict[str, tuple[int, int, int]] = {}
    for _, _, dt in parsed:
        start = bucket_start(dt.minute, width)
        end = bucket_end(start, width)
        key = format_bucket_key(dt.hour, start, end, cfg.zero_pad_hour)
        counts[key] = counts.get(key, 0) + 1
        windows[key] = (dt.hour, start, end)

    buckets = tuple(
        TimeBucket(
            bucket_key=key,
            count=counts[key],
            hour=windows[key][0],
            start_minute=windows[key][1],
            end_minute=windows[key][2],
        )
        for key in sorted(counts)
    )
    logger.debug("bucket_by_time: %d buckets, %d skipped", len(buckets), len(skipped))
    return BucketResult(buckets=buckets, skipped=tuple(skipped))


def order_by_recency(
    events: Sequence[LoginEvent],
    *,
    config: Optional[AggregatorConfig] = None,
) -> RecencyResult:
    """Order events newest first.

    Instants are compared absolutely (offsets respected). Events with equal
    instants keep their input order; sorted(reverse=True) is stable.

    Args:
        events: Login events.
        config: Malformed-timestamp policy.

    Returns:
        RecencyResult with the reordered events and any skipped events.

    Raises:
        MalformedTimestamp: If config.strict and a timestamp cannot be parsed.
    """
    cfg = config or AggregatorConfig()
    parsed, skipped = _parse_all(events, cfg)
    ordered = sorted(parsed, key=lambda entry: entry[2], reverse=True)
    return RecencyResult(
        events=tuple(event for _, event, _ in ordered),
        skipped=tuple(skipped),
    )
