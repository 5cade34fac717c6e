"""Dataset loading and tabular views for login events.

Events come from an external source (an exported CSV or a JSON array of
records); nothing here hardcodes event data. Derived aggregator results are
turned back into DataFrames for table and chart display.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import pandas as pd

from logindash.aggregator.config import AggregatorConfig
from logindash.aggregator.events import CategoryCount, LoginEvent, TimeBucket
from logindash.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

# Column names of the chart data frames.
CATEGORY_COLUMN = "company"
CATEGORY_VALUE_COLUMN = "value"
BUCKET_COLUMN = "time"
BUCKET_COUNT_COLUMN = "count"


def _require_columns(df: pd.DataFrame, cfg: AggregatorConfig) -> None:
    missing = [c for c in (cfg.category_field, cfg.subject_field, cfg.timestamp_field) if c not in df.columns]
    if missing:
        raise ValueError(f"event data is missing required column(s): {missing}")


def events_from_frame(
    df: pd.DataFrame,
    *,
    config: Optional[AggregatorConfig] = None,
) -> list[LoginEvent]:
    """Convert a DataFrame (one row per event) into LoginEvent objects.

    Missing cells become None before conversion, so a missing timestamp is
    reported later as malformed rather than parsed as "nan".

    Raises:
        ValueError: If a required column is absent or a row lacks its
            category or subject id.
    """
    cfg = config or AggregatorConfig()
    _require_columns(df, cfg)
    clean = df.astype(object).where(df.notna(), None)
    events: list[LoginEvent] = []
    for row_num, record in enumerate(clean.to_dict(orient="records")):
        try:
            events.append(LoginEvent.from_record(record, cfg))
        except ValueError as e:
            raise ValueError(f"row {row_num}: {e}") from e
    return events


def events_to_frame(
    events: Iterable[LoginEvent],
    *,
    config: Optional[AggregatorConfig] = None,
) -> pd.DataFrame:
    """Flatten events into a DataFrame with the configured column names."""
    cfg = config or AggregatorConfig()
    records = [e.to_record(cfg) for e in events]
    if not records:
        return pd.DataFrame(columns=[cfg.category_field, cfg.subject_field, cfg.timestamp_field])
    return pd.DataFrame.from_records(records)


def load_events_csv(path: PathLike, *, config: Optional[AggregatorConfig] = None) -> list[LoginEvent]:
    """Load events from a CSV export.

    Category, subject and timestamp columns are read as text so company codes
    such as "0999" keep their leading zeros.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If required columns are missing or a row is invalid.
    """
    cfg = config or AggregatorConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Event file not found: {path}")
    header = pd.read_csv(path, nrows=0).columns
    text_columns = {c: str for c in cfg.reserved_fields if c in header}
    df = pd.read_csv(path, dtype=text_columns)
    events = events_from_frame(df, config=cfg)
    logger.info("Loaded %d events from %s", len(events), path)
    return events


def load_events_json(path: PathLike, *, config: Optional[AggregatorConfig] = None) -> list[LoginEvent]:
    """Load events from a JSON array of flat records.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If required columns are missing or a row is invalid.
    """
    cfg = config or AggregatorConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Event file not found: {path}")
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if df.empty and not len(df.columns):
        logger.info("Loaded 0 events from %s", path)
        return []
    events = events_from_frame(df, config=cfg)
    logger.info("Loaded %d events from %s", len(events), path)
    return events


def load_events(path: PathLike, *, config: Optional[AggregatorConfig] = None) -> list[LoginEvent]:
    """Load events from a .csv or .json file, chosen by suffix.

    Raises:
        ValueError: For any other suffix.
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return load_events_csv(path, config=config)
    if suffix == ".json":
        return load_events_json(path, config=config)
    raise ValueError(f"Unsupported event file type {suffix!r}; expected .csv or .json")


def category_counts_frame(categories: Sequence[CategoryCount]) -> pd.DataFrame:
    """Chart data for the company distribution (columns: company, value)."""
    return pd.DataFrame(
        {
            CATEGORY_COLUMN: [c.category for c in categories],
            CATEGORY_VALUE_COLUMN: [c.count for c in categories],
        }
    )


def time_buckets_frame(buckets: Sequence[TimeBucket]) -> pd.DataFrame:
    """Chart data for the login time distribution (columns: time, count)."""
    return pd.DataFrame(
        {
            BUCKET_COLUMN: [b.bucket_key for b in buckets],
            BUCKET_COUNT_COLUMN: [b.count for b in buckets],
        }
    )
