"""Utility functions for timesheet summary system."""
from typing import Iterable, List, Optional

from timesheet_summary.utilities.models import RawEntry
from timesheet_summary.transformers import data_processor


def month_key(date_text: Optional[str]) -> Optional[str]:
    """
    Derive a YYYY-MM key from a raw date string.

    The date is parsed the same way the aggregation parses it; values that
    are not a valid date fall back to their first seven characters.

    Args:
        date_text: Raw date string from the timesheet

    Returns:
        Month key, or None for a blank date
    """
    if date_text is None:
        return None
    text = str(date_text).strip()
    if not text:
        return None

    parsed = data_processor.parse_date(text)
    if parsed is not None:
        return parsed.strftime("%Y-%m")
    return text[:7]


def available_months(rows: Iterable[RawEntry]) -> List[str]:
    """
    Collect the distinct month keys present in the rows.

    Args:
        rows: Raw timesheet rows

    Returns:
        Month keys, newest first
    """
    months = {month_key(row.date) for row in rows}
    months.discard(None)
    return sorted(months, reverse=True)


def describe_months(months: Optional[Iterable[str]]) -> str:
    """Human readable description of a month selection for logging."""
    if months is None:
        return "all months"
    selected = sorted(set(months))
    if not selected:
        return "no months"
    if len(selected) == 1:
        return f"month {selected[0]}"
    return f"{len(selected)} months ({selected[0]} to {selected[-1]})"
