"""Login event aggregator: category counts, time buckets, recency order and stats.

Pure Python; importing this package does not import any GUI toolkit.
"""

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
from logindash.aggregator.stats import SummaryStats, average_per_category, summary_stats
from logindash.aggregator.summary import LoginSummary, SummaryCache, summarize
from logindash.aggregator.timestamps import bucket_key_for, parse_timestamp
from logindash.aggregator.transforms import bucket_by_time, group_by_category, order_by_recency

__all__ = [
    "AggregatorConfig",
    "BucketResult",
    "CategoryCount",
    "LoginEvent",
    "LoginSummary",
    "MalformedTimestamp",
    "RecencyResult",
    "SkippedEvent",
    "SummaryCache",
    "SummaryStats",
    "TimeBucket",
    "average_per_category",
    "bucket_by_time",
    "bucket_key_for",
    "group_by_category",
    "order_by_recency",
    "parse_timestamp",
    "summarize",
    "summary_stats",
]
