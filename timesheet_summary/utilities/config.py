"""Configuration constants and settings for timesheet summary system."""
import os
from typing import Dict, List, Set

# ============================================================================
# INPUT FILE CONFIGURATION
# ============================================================================

# Zero-based row index of the header row; the export carries a title block above it
HEADER_ROW_OFFSET = int(os.getenv("TIMESHEET_HEADER_ROW", "4"))

SUPPORTED_EXCEL_SUFFIXES: Set[str] = {".xlsx", ".xlsm", ".xls"}
SUPPORTED_CSV_SUFFIXES: Set[str] = {".csv"}

# ============================================================================
# COLUMN DEFINITIONS
# ============================================================================

DATE_COLUMN = "Date"
HOURS_COLUMN = "Hours Worked"
PROJECT_COLUMN = "Project Name"
TASK_COLUMN = "Task"
TASK_DETAIL_COLUMN = "Task Detail"
STATUS_COLUMN = "Status"

SOURCE_COLUMNS: List[str] = [
    DATE_COLUMN,
    HOURS_COLUMN,
    PROJECT_COLUMN,
    TASK_COLUMN,
    TASK_DETAIL_COLUMN,
    STATUS_COLUMN,
]

REQUIRED_SOURCE_COLUMNS: List[str] = [
    DATE_COLUMN,
    HOURS_COLUMN,
    PROJECT_COLUMN,
    TASK_COLUMN,
    STATUS_COLUMN,
]

# Source column -> RawEntry attribute
COLUMN_MAP: Dict[str, str] = {
    DATE_COLUMN: "date",
    HOURS_COLUMN: "hours_worked",
    PROJECT_COLUMN: "project_name",
    TASK_COLUMN: "task",
    TASK_DETAIL_COLUMN: "task_detail",
    STATUS_COLUMN: "status",
}

# Date cells decoded as real dates are rendered back to the sheet's text format
CELL_DATE_FORMAT = "%d/%m/%Y"

# ============================================================================
# BUSINESS RULES
# ============================================================================

REJECT_STATUS = "Reject"
LEAVE_LABEL = "Leave"

HOURS_PER_MANDAY = 8
LEAVE_FULL_DAY_HOURS = 8.0
LEAVE_HALF_DAY_HOURS = 4.0

# A gap above this many days between active dates splits a project's timeline
RANGE_GAP_DAYS = 30

TWO_DIGIT_YEAR_BASE = 2000

# ============================================================================
# EXPORT CONFIGURATION
# ============================================================================

DEFAULT_EXPORT_PATH = os.getenv("TIMESHEET_EXPORT_PATH", "timesheet_summary.xlsx")
EXPORT_SHEET_NAME = "Summary"

EXPORT_COLUMNS: List[str] = ["Project Name", "Task Name", "Manhours", "Mandays"]
EXPORT_COLUMN_WIDTHS: Dict[str, int] = {
    "Project Name": 40,
    "Task Name": 40,
    "Manhours": 15,
    "Mandays": 15,
}

EXPORT_TITLE = "SUMMARY REPORT"
EXPORT_WORKING_DAYS_LABEL = "Total Working Days"
EXPORT_GRAND_TOTAL_LABEL = "GRAND TOTAL"
