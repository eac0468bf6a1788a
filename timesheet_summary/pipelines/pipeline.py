"""Main orchestration pipeline for timesheet summaries."""
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from timesheet_summary.utilities import utils
from timesheet_summary.utilities.models import Summary
from timesheet_summary.extractors import excel_reader
from timesheet_summary.loaders import excel_writer
from timesheet_summary.transformers import summary_service

logger = logging.getLogger(__name__)


def log_summary(summary: Summary) -> None:
    """
    Write a per-project overview of a summary to the log.

    Args:
        summary: Summary to describe
    """
    logger.info(
        "Summary: %d project(s), %d working day(s), %.2f manhours (%.2f mandays)",
        len(summary.projects),
        summary.total_working_days,
        summary.total_manhours,
        summary.total_mandays,
    )
    for project in summary.projects:
        period = (
            f"{project.start_date} to {project.end_date}"
            if project.start_date
            else "no dates"
        )
        logger.info(
            "  %s: %.2f h / %.2f d, %d task(s), %d active period(s), %s",
            project.project_name,
            project.total_manhours,
            project.total_mandays,
            len(project.tasks),
            len(project.date_ranges),
            period,
        )


def run_summary_pipeline(
    file_path: str | Path,
    months: Optional[Sequence[str]] = None,
    projects: Optional[Sequence[str]] = None,
    export_path: Optional[str | Path] = None,
) -> Summary:
    """
    Run the complete timesheet summary pipeline.

    Args:
        file_path: Timesheet export to read
        months: YYYY-MM keys to keep (all months if not provided)
        projects: Project names to keep (all projects if not provided)
        export_path: If given, write the summary workbook here

    Returns:
        The computed summary

    Raises:
        TimesheetDecodeError: If the timesheet file cannot be decoded
    """
    logger.info("=" * 70)
    logger.info("STARTING TIMESHEET SUMMARY PIPELINE")
    logger.info("File: %s", file_path)
    logger.info("Months: %s", utils.describe_months(months))
    logger.info("=" * 70)

    start_time = time.time()

    data = excel_reader.load_timesheet_file(file_path)
    available = utils.available_months(data.rows)
    logger.info("Months in file: %s", ", ".join(available) if available else "none")

    summary = summary_service.calculate_monthly_summary(data.rows, months)
    if projects:
        summary = summary_service.select_projects(summary, projects)

    if not summary.projects:
        logger.warning("⚠ No project activity found for %s", utils.describe_months(months))

    log_summary(summary)

    if export_path:
        excel_writer.write_summary_workbook(summary, export_path)

    elapsed_time = time.time() - start_time
    logger.info("=" * 70)
    logger.info("PIPELINE COMPLETE - Total time: %.2f seconds", elapsed_time)
    logger.info("=" * 70)

    return summary
