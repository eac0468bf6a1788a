"""Data parsing, cleaning, and normalization for timesheet summary system."""
import logging
import re
from dataclasses import asdict
from datetime import date, datetime
from typing import Iterable, Optional

import pandas as pd

from timesheet_summary.utilities import config
from timesheet_summary.utilities.models import RawEntry

logger = logging.getLogger(__name__)

ENTRY_COLUMNS = list(config.COLUMN_MAP.values())

# "5h 00m (13:00:00 - 18:00:00)" -> hours, minutes
_DURATION_PATTERN = re.compile(r"(\d+)h\s+(\d+)m")
_DATE_SEPARATORS = re.compile(r"[/.\-]")


def parse_hours(text: Optional[str]) -> float:
    """
    Extract total hours from a free-text duration.

    Trailing text after the "<N>h <N>m" part is ignored. Empty or
    unrecognised input counts as zero hours.

    Args:
        text: Duration descriptor, e.g. "5h 30m (13:00:00 - 18:30:00)"

    Returns:
        Hours as a float
    """
    if text is None or (isinstance(text, float) and pd.isna(text)):
        return 0.0
    match = _DURATION_PATTERN.search(str(text))
    if not match:
        return 0.0
    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours + minutes / 60


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a timesheet date string.

    ISO formats are tried first; otherwise the value is read as
    day/month/year separated by "/", "." or "-".

    Args:
        text: Raw date value

    Returns:
        Calendar date, or None if the value is not a valid date
    """
    if isinstance(text, datetime):
        return text.date()
    if isinstance(text, date):
        return text
    if text is None:
        return None

    value = str(text).strip()
    if not value:
        return None

    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return _parse_day_first(value)


def _parse_day_first(value: str) -> Optional[date]:
    """Parse DD/MM/YYYY style strings, promoting two-digit years."""
    parts = _DATE_SEPARATORS.split(value)
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(part) for part in parts)
    except ValueError:
        return None
    if year < 100:
        year += config.TWO_DIGIT_YEAR_BASE
    try:
        return date(year, month, day)
    except ValueError:
        return None


def normalize_text_series(series: pd.Series) -> pd.Series:
    """
    Normalize a text series by stripping whitespace.

    Args:
        series: Input series

    Returns:
        Normalized series
    """
    return series.apply(lambda value: "" if pd.isna(value) else str(value).strip())


def rows_to_frame(rows: Iterable[RawEntry]) -> pd.DataFrame:
    """
    Frame raw entries, one column per RawEntry field.

    Args:
        rows: Raw timesheet rows

    Returns:
        DataFrame with missing values replaced by empty strings
    """
    frame = pd.DataFrame([asdict(row) for row in rows], columns=ENTRY_COLUMNS)
    return frame.fillna("")


def drop_rejected(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Remove rows carrying the reject status.

    Args:
        frame: Framed timesheet rows

    Returns:
        Rows that take part in the summary
    """
    if frame.empty:
        return frame

    rejected = normalize_text_series(frame["status"]) == config.REJECT_STATUS
    if rejected.any():
        logger.debug("Ignoring %d rejected row(s)", int(rejected.sum()))
    return frame[~rejected]


def count_records_by_date(frame: pd.DataFrame) -> pd.Series:
    """
    Count rows per raw date string.

    Dates are grouped by their literal text, so two spellings of the same
    day are separate keys.

    Args:
        frame: Non-rejected rows

    Returns:
        Series mapping raw date string -> number of rows
    """
    if frame.empty:
        return pd.Series(dtype="int64")
    return frame["date"].astype(str).value_counts(sort=False)
