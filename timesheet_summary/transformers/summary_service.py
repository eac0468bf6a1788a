"""Business logic for timesheet aggregation."""
import logging
from dataclasses import replace
from datetime import date
from typing import Collection, Iterable, List, Optional, Sequence

import pandas as pd

from timesheet_summary.utilities import config, utils
from timesheet_summary.utilities.models import (
    DateRange,
    ProjectAggregate,
    RawEntry,
    Summary,
    TaskAggregate,
)
from timesheet_summary.transformers import data_processor

logger = logging.getLogger(__name__)


def calculate_summary(rows: Iterable[RawEntry]) -> Summary:
    """
    Aggregate raw timesheet rows into a per-project, per-task summary.

    Rejected rows are ignored. Rows without a project are booked on the
    Leave project: a lone entry for its date counts as a full day, an entry
    sharing its date with others as half a day. Rows that still have no task
    name are dropped from the totals but their date stays a working day.

    Args:
        rows: Raw timesheet rows

    Returns:
        Summary with projects ordered by start date
    """
    frame = data_processor.rows_to_frame(rows)
    accepted = data_processor.drop_rejected(frame)
    records_by_date = data_processor.count_records_by_date(accepted)
    total_working_days = len(records_by_date)

    if accepted.empty:
        return Summary(projects=(), total_working_days=total_working_days)

    working = _classify_rows(accepted, records_by_date)

    unnamed = working["task_name"] == ""
    if unnamed.any():
        logger.debug("Dropped %d row(s) without a task name", int(unnamed.sum()))
    working = working[~unnamed]

    projects = [
        _build_project(str(project_name), group)
        for project_name, group in working.groupby("project_name", sort=False)
    ]
    projects.sort(key=_project_sort_key)

    logger.debug(
        "Aggregated %d row(s) into %d project(s) over %d working day(s)",
        len(working),
        len(projects),
        total_working_days,
    )
    return Summary(projects=tuple(projects), total_working_days=total_working_days)


def _classify_rows(accepted: pd.DataFrame, records_by_date: pd.Series) -> pd.DataFrame:
    """
    Resolve project, task and hours for every accepted row.

    Args:
        accepted: Non-rejected rows
        records_by_date: Row count per raw date string

    Returns:
        Copy of the rows with project_name, task_name and hours set
    """
    working = accepted.copy()

    project = data_processor.normalize_text_series(working["project_name"])
    task = data_processor.normalize_text_series(working["task"])
    is_leave = project == ""

    working["project_name"] = project.mask(is_leave, config.LEAVE_LABEL)
    working["task_name"] = task.mask(is_leave & (task == ""), config.LEAVE_LABEL)

    hours = working["hours_worked"].map(data_processor.parse_hours).astype(float)
    day_counts = working["date"].astype(str).map(records_by_date)
    leave_hours = day_counts.eq(1).map(
        {True: config.LEAVE_FULL_DAY_HOURS, False: config.LEAVE_HALF_DAY_HOURS}
    )
    working["hours"] = hours.mask(is_leave, leave_hours)

    return working


def _build_project(project_name: str, group: pd.DataFrame) -> ProjectAggregate:
    """Build the aggregate for one project's rows."""
    task_hours = group.groupby("task_name", sort=False)["hours"].sum()
    tasks = sorted(
        (
            TaskAggregate(
                task_name=str(task_name),
                manhours=float(manhours),
                mandays=float(manhours) / config.HOURS_PER_MANDAY,
            )
            for task_name, manhours in task_hours.items()
        ),
        key=lambda task: task.manhours,
    )

    parsed = (data_processor.parse_date(value) for value in group["date"])
    dates = [value for value in parsed if value is not None]
    ranges = compute_date_ranges(dates)

    return ProjectAggregate(
        project_name=project_name,
        tasks=tuple(tasks),
        total_manhours=sum(task.manhours for task in tasks),
        total_mandays=sum(task.mandays for task in tasks),
        start_date=ranges[0].start if ranges else None,
        end_date=ranges[-1].end if ranges else None,
        date_ranges=tuple(ranges),
    )


def compute_date_ranges(
    dates: Sequence[date],
    gap_days: int = config.RANGE_GAP_DAYS,
) -> List[DateRange]:
    """
    Split active dates into windows of contiguous activity.

    A new window starts whenever the next date lies more than gap_days
    after the end of the current one.

    Args:
        dates: Active dates, any order, duplicates allowed
        gap_days: Largest gap that still joins two dates

    Returns:
        Chronological, disjoint date ranges
    """
    ordered = sorted(set(dates))
    if not ordered:
        return []

    ranges: List[DateRange] = []
    start = end = ordered[0]
    for current in ordered[1:]:
        if (current - end).days > gap_days:
            ranges.append(DateRange(start=start, end=end))
            start = current
        end = current
    ranges.append(DateRange(start=start, end=end))
    return ranges


def _project_sort_key(project: ProjectAggregate):
    # Projects without any dated row go last
    return (project.start_date is None, project.start_date or date.min)


def filter_rows_by_months(
    rows: Iterable[RawEntry],
    months: Collection[str],
) -> List[RawEntry]:
    """
    Keep rows whose date falls into one of the given months.

    Args:
        rows: Raw timesheet rows
        months: Accepted YYYY-MM keys

    Returns:
        Matching rows in their original order
    """
    accepted = set(months)
    return [row for row in rows if utils.month_key(row.date) in accepted]


def calculate_monthly_summary(
    rows: Iterable[RawEntry],
    months: Optional[Collection[str]] = None,
) -> Summary:
    """
    Re-run the aggregation over the rows of the selected months.

    Every figure, including the working-day count, is computed from the
    filtered rows only.

    Args:
        rows: All raw timesheet rows
        months: Accepted YYYY-MM keys; None keeps every row

    Returns:
        Summary of the selected months
    """
    all_rows = list(rows)
    if months is None:
        return calculate_summary(all_rows)

    selected = filter_rows_by_months(all_rows, months)
    logger.info(
        "Re-aggregating %d of %d row(s) for %s",
        len(selected),
        len(all_rows),
        utils.describe_months(months),
    )
    return calculate_summary(selected)


def select_projects(summary: Summary, project_names: Iterable[str]) -> Summary:
    """
    Narrow a summary to the named projects.

    Order and working-day count are kept; grand totals follow the selection.

    Args:
        summary: Summary to narrow
        project_names: Projects to keep

    Returns:
        New summary with the selected projects only
    """
    wanted = set(project_names)
    missing = wanted.difference(summary.project_names)
    if missing:
        logger.warning("Unknown project(s) ignored: %s", ", ".join(sorted(missing)))
    return replace(
        summary,
        projects=tuple(project for project in summary.projects if project.project_name in wanted),
    )
