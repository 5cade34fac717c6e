"""Scalar statistics derived from a login event collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from logindash.aggregator.events import CategoryCount, LoginEvent
from logindash.aggregator.transforms import group_by_category


@dataclass(frozen=True)
class SummaryStats:
    """Headline numbers for the dashboard cards.

    Attributes:
        total_count: Number of input events.
        unique_category_count: Number of distinct categories.
        average_per_category: total_count / unique_category_count, or None
            when there are no categories (empty input).
    """

    total_count: int
    unique_category_count: int
    average_per_category: Optional[float]

    @property
    def has_average(self) -> bool:
        return self.average_per_category is not None


def average_per_category(total_count: int, unique_category_count: int) -> Optional[float]:
    """Mean events per category; None instead of dividing by zero."""
    if unique_category_count == 0:
        return None
    return total_count / unique_category_count


def summary_stats(
    events: Sequence[LoginEvent],
    categories: Optional[Sequence[CategoryCount]] = None,
) -> SummaryStats:
    """Compute total, distinct-category and average-per-category counts.

    Args:
        events: Login events.
        categories: Output of group_by_category for the same events. Computed
            here when omitted.
    """
    if categories is None:
        categories = group_by_category(events)
    total = len(events)
    unique = len(categories)
    return SummaryStats(
        total_count=total,
        unique_category_count=unique,
        average_per_category=average_per_category(total, unique),
    )
