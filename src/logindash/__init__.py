"""
logindash: login analytics for employee check-in events.

This package provides:
- Aggregator: per-company counts, 5-minute login trend buckets, recency order
  and headline statistics over a list of LoginEvent
- Dataset helpers that load events from CSV/JSON via pandas
- A NiceGUI dashboard widget and app (logindash.dashboard, logindash.dashboard_app)
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from logindash.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from logindash.utils.logging import configure_logging, get_logger

from logindash.aggregator import (
    AggregatorConfig,
    LoginEvent,
    LoginSummary,
    MalformedTimestamp,
    SummaryCache,
    summarize,
)

# NullHandler so library logs do not reach the root logger until an
# application calls configure_logging().
_logger = logging.getLogger("logindash")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "AggregatorConfig",
    "LoginEvent",
    "LoginSummary",
    "MalformedTimestamp",
    "SummaryCache",
    "configure_logging",
    "get_logger",
    "summarize",
]

__version__ = "0.1.0"
