"""
Print the login summary for an event file.

Demonstrates:
- Loading events from CSV/JSON with logindash.dataset
- summarize() output: company counts, 5-minute trend, recent logins
- Skipped-event reporting for unreadable timestamps

Run:
    python examples/summarize_events.py data/login_events_sample.csv
"""

import sys

from logindash.aggregator import summarize
from logindash.dataset import category_counts_frame, load_events, time_buckets_frame
from logindash.utils.logging import configure_logging

configure_logging(level="INFO")


def main(path: str) -> None:
    summary = summarize(load_events(path))
    stats = summary.stats

    print(f"Active users:        {stats.total_count}")
    print(f"Active companies:    {stats.unique_category_count}")
    avg = "n/a" if stats.average_per_category is None else f"{stats.average_per_category:.1f}"
    print(f"Average per company: {avg}")

    print("\nCompany distribution")
    print(category_counts_frame(summary.categories).to_string(index=False))

    print("\nLogin time distribution")
    print(time_buckets_frame(summary.buckets).to_string(index=False))

    print("\nMost recent logins")
    for event in summary.recent[:5]:
        print(f"  {event.timestamp}  {event.subject_id}  {event.category}")

    if summary.skipped:
        print(f"\n{summary.skipped_count} event(s) skipped:")
        for s in summary.skipped:
            print(f"  #{s.index}: {s.reason}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "data/login_events_sample.csv")
