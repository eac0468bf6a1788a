"""Spreadsheet export of timesheet summaries."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from openpyxl.utils import get_column_letter

from timesheet_summary.utilities import config
from timesheet_summary.utilities.models import Summary

logger = logging.getLogger(__name__)


def _export_row(
    project: Optional[str] = None,
    task: Optional[str] = None,
    manhours: Optional[float] = None,
    mandays: Optional[float] = None,
) -> Dict[str, object]:
    project_col, task_col, manhours_col, mandays_col = config.EXPORT_COLUMNS
    return {
        project_col: project,
        task_col: task,
        manhours_col: manhours,
        mandays_col: mandays,
    }


def build_export_rows(summary: Summary) -> List[Dict[str, object]]:
    """
    Flatten a summary into the export row layout.

    Layout: title, working days, blank; per project a header row with its
    totals, one row per task and a blank separator; then the grand total.

    Args:
        summary: Summary to export

    Returns:
        Rows keyed by export column name
    """
    rows = [
        _export_row(project=config.EXPORT_TITLE),
        _export_row(
            project=f"{config.EXPORT_WORKING_DAYS_LABEL}: {summary.total_working_days}"
        ),
        _export_row(),
    ]

    grand_manhours = 0.0
    grand_mandays = 0.0
    for project in summary.projects:
        rows.append(
            _export_row(
                project=project.project_name,
                manhours=project.total_manhours,
                mandays=project.total_mandays,
            )
        )
        grand_manhours += project.total_manhours
        grand_mandays += project.total_mandays

        for task in project.tasks:
            rows.append(
                _export_row(task=task.task_name, manhours=task.manhours, mandays=task.mandays)
            )
        rows.append(_export_row())

    rows.append(
        _export_row(
            project=config.EXPORT_GRAND_TOTAL_LABEL,
            manhours=grand_manhours,
            mandays=grand_mandays,
        )
    )
    return rows


def build_export_frame(summary: Summary) -> pd.DataFrame:
    """Export rows as a DataFrame with exactly the four export columns."""
    return pd.DataFrame(build_export_rows(summary), columns=config.EXPORT_COLUMNS)


def write_summary_workbook(
    summary: Summary,
    file_path: str | Path = config.DEFAULT_EXPORT_PATH,
) -> Path:
    """
    Write a summary to an Excel workbook.

    Args:
        summary: Summary to export
        file_path: Target .xlsx path

    Returns:
        Path of the written workbook

    Raises:
        Exception: If the workbook cannot be written
    """
    target = Path(file_path)
    frame = build_export_frame(summary)

    try:
        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name=config.EXPORT_SHEET_NAME, index=False)
            worksheet = writer.sheets[config.EXPORT_SHEET_NAME]
            for index, column in enumerate(config.EXPORT_COLUMNS, start=1):
                worksheet.column_dimensions[get_column_letter(index)].width = (
                    config.EXPORT_COLUMN_WIDTHS[column]
                )
    except Exception as exc:
        logger.error("✗ Failed to write summary workbook %s", target)
        raise Exception(f"Failed to write summary workbook: {type(exc).__name__} - {exc}") from exc

    logger.info("✓ Summary workbook written to %s (%d rows)", target, len(frame))
    return target
