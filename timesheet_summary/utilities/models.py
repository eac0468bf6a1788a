"""Data models for timesheet summary system."""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class RawEntry:
    """One decoded timesheet row, values kept as text."""
    date: str = ""
    hours_worked: str = ""
    project_name: str = ""
    task: str = ""
    task_detail: str = ""
    status: str = ""


@dataclass(frozen=True)
class TaskAggregate:
    """Accumulated effort for one task of a project."""
    task_name: str
    manhours: float
    mandays: float


@dataclass(frozen=True)
class DateRange:
    """Inclusive window of contiguous project activity."""
    start: date
    end: date


@dataclass(frozen=True)
class ProjectAggregate:
    """Per-project totals, tasks and activity windows."""
    project_name: str
    tasks: Tuple[TaskAggregate, ...] = ()
    total_manhours: float = 0.0
    total_mandays: float = 0.0
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    date_ranges: Tuple[DateRange, ...] = ()


@dataclass(frozen=True)
class Summary:
    """Aggregated view of a timesheet export."""
    projects: Tuple[ProjectAggregate, ...] = ()
    total_working_days: int = 0

    @property
    def total_manhours(self) -> float:
        return sum(project.total_manhours for project in self.projects)

    @property
    def total_mandays(self) -> float:
        return sum(project.total_mandays for project in self.projects)

    @property
    def project_names(self) -> List[str]:
        return [project.project_name for project in self.projects]


@dataclass
class TimesheetData:
    """Container for a decoded timesheet file."""
    rows: List[RawEntry] = field(default_factory=list)
    source_file: str = ""
    blank_rows_skipped: int = 0
