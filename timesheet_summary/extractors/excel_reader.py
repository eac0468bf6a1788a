"""Timesheet file reading and validation for timesheet summary system."""
import logging
from datetime import date, datetime
from pathlib import Path
from typing import List

import pandas as pd

from timesheet_summary.utilities import config
from timesheet_summary.utilities.models import RawEntry, TimesheetData

logger = logging.getLogger(__name__)


class TimesheetDecodeError(Exception):
    """Raised when a timesheet file cannot be turned into rows."""


def load_timesheet_file(
    file_path: str | Path,
    header_row: int = config.HEADER_ROW_OFFSET,
) -> TimesheetData:
    """
    Load the timesheet rows from a spreadsheet export.

    The first sheet is read with the header at the given row; everything
    above it is the export's title block. Either every row is returned or
    TimesheetDecodeError is raised.

    Args:
        file_path: Path to an Excel workbook or CSV file
        header_row: Zero-based index of the header row

    Returns:
        TimesheetData with decoded rows

    Raises:
        TimesheetDecodeError: If the file is missing, unreadable or lacks required columns
    """
    path = Path(file_path)
    if not path.exists():
        raise TimesheetDecodeError(f"File {path} does not exist")

    raw = _read_frame(path, header_row)
    raw.columns = [str(column).strip() for column in raw.columns]

    missing_required = [
        column for column in config.REQUIRED_SOURCE_COLUMNS
        if column not in raw.columns
    ]
    if missing_required:
        raise TimesheetDecodeError(
            f"File {path} is missing required columns: {', '.join(missing_required)}"
        )

    for column in config.SOURCE_COLUMNS:
        if column not in raw.columns:
            raw[column] = pd.NA

    # CSV cells arrive as "" rather than NA
    frame = raw[config.SOURCE_COLUMNS].replace(r"^\s*$", pd.NA, regex=True)
    populated = frame.notna().any(axis=1)
    blank_rows = int((~populated).sum())
    frame = frame[populated]

    data = TimesheetData(
        rows=frame_to_rows(frame),
        source_file=path.name,
        blank_rows_skipped=blank_rows,
    )
    logger.info(
        "Loaded %d row(s) from %s (%d blank row(s) skipped)",
        len(data.rows),
        data.source_file,
        data.blank_rows_skipped,
    )
    return data


def _read_frame(path: Path, header_row: int) -> pd.DataFrame:
    """Read the first sheet (or the CSV) with every cell kept as an object."""
    suffix = path.suffix.lower()
    try:
        if suffix in config.SUPPORTED_EXCEL_SUFFIXES:
            return pd.read_excel(path, sheet_name=0, header=header_row, dtype=object)
        if suffix in config.SUPPORTED_CSV_SUFFIXES:
            return pd.read_csv(path, header=header_row, dtype=str, keep_default_na=False)
    except Exception as exc:
        raise TimesheetDecodeError(
            f"File {path} could not be read: {type(exc).__name__} - {exc}"
        ) from exc

    raise TimesheetDecodeError(f"File {path} has an unsupported type '{suffix}'")


def frame_to_rows(frame: pd.DataFrame) -> List[RawEntry]:
    """
    Convert a frame with the source columns into raw entries.

    Args:
        frame: DataFrame with the timesheet source columns

    Returns:
        One RawEntry per frame row
    """
    rows: List[RawEntry] = []
    for record in frame.to_dict(orient="records"):
        values = {
            attribute: _cell_to_text(record.get(column))
            for column, attribute in config.COLUMN_MAP.items()
        }
        rows.append(RawEntry(**values))
    return rows


def _cell_to_text(value: object) -> str:
    """Render a spreadsheet cell as the text the sheet displays."""
    if value is None or pd.isna(value):
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime(config.CELL_DATE_FORMAT)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
