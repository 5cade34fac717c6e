"""One computation cycle over an event collection, plus last-input memoization.

summarize() snapshots the input and runs every transform on it.
SummaryCache recomputes only when the snapshot differs from the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from logindash.aggregator.config import AggregatorConfig
from logindash.aggregator.events import CategoryCount, LoginEvent, SkippedEvent, TimeBucket
from logindash.aggregator.stats import SummaryStats, summary_stats
from logindash.aggregator.transforms import bucket_by_time, group_by_category, order_by_recency
from logindash.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginSummary:
    """All derived structures for one input snapshot.

    Attributes:
        categories: Counts per category, most frequent first.
        buckets: Login trend buckets sorted by key.
        recent: Events newest first.
        stats: Headline scalar statistics.
        skipped: Events dropped by any transform, ordered by input index.
    """

    categories: tuple[CategoryCount, ...]
    buckets: tuple[TimeBucket, ...]
    recent: tuple[LoginEvent, ...]
    stats: SummaryStats
    skipped: tuple[SkippedEvent, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def _merge_skipped(*groups: Iterable[SkippedEvent]) -> tuple[SkippedEvent, ...]:
    by_index: dict[int, SkippedEvent] = {}
    for group in groups:
        for s in group:
            by_index.setdefault(s.index, s)
    return tuple(by_index[i] for i in sorted(by_index))


def summarize(
    events: Iterable[LoginEvent],
    *,
    config: Optional[AggregatorConfig] = None,
) -> LoginSummary:
    """Run every aggregator transform over one snapshot of events.

    Args:
        events: Login events. Consumed once into a tuple.
        config: Aggregator configuration shared by the transforms.

    Raises:
        MalformedTimestamp: If config.strict and a timestamp cannot be parsed.
    """
    snapshot = tuple(events)
    categories = group_by_category(snapshot)
    bucket_result = bucket_by_time(snapshot, config=config)
    recency_result = order_by_recency(snapshot, config=config)
    summary = LoginSummary(
        categories=categories,
        buckets=bucket_result.buckets,
        recent=recency_result.events,
        stats=summary_stats(snapshot, categories),
        skipped=_merge_skipped(bucket_result.skipped, recency_result.skipped),
    )
    logger.debug(
        "summarize: %d events, %d categories, %d buckets, %d skipped",
        summary.stats.total_count,
        summary.stats.unique_category_count,
        len(summary.buckets),
        summary.skipped_count,
    )
    return summary


class SummaryCache:
    """Memoize summarize() for the most recent input only.

    Not thread-safe; keep one instance per consumer (e.g. per widget).
    """

    def __init__(self, config: Optional[AggregatorConfig] = None) -> None:
        self._config = config
        self._snapshot: Optional[tuple[LoginEvent, ...]] = None
        self._summary: Optional[LoginSummary] = None

    @property
    def config(self) -> Optional[AggregatorConfig]:
        return self._config

    def get(self, events: Iterable[LoginEvent]) -> LoginSummary:
        """Return the summary for events, recomputing only if the input changed."""
        snapshot = tuple(events)
        if self._summary is not None and snapshot == self._snapshot:
            return self._summary
        self._summary = summarize(snapshot, config=self._config)
        self._snapshot = snapshot
        return self._summary

    def clear(self) -> None:
        """Forget the cached input and summary."""
        self._snapshot = None
        self._summary = None
