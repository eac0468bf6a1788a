"""Tests for timesheet file decoding."""
from datetime import datetime

import pytest
from openpyxl import Workbook

from timesheet_summary.extractors import excel_reader
from timesheet_summary.utilities.models import RawEntry

HEADER = ["Date", "Hours Worked", "Project Name", "Task", "Task Detail", "Status"]

PREAMBLE = [
    ["Timesheet"],
    ["Employee", "Jane Doe"],
    ["Period", "January 2024"],
    ["Generated", "01/02/2024"],
]


def _write_workbook(path, rows, header=HEADER):
    workbook = Workbook()
    sheet = workbook.active
    for line in PREAMBLE:
        sheet.append(line)
    sheet.append(header)
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


class TestLoadTimesheetFile:
    """Test reading timesheet exports."""

    def test_reads_rows_after_title_block(self, tmp_path):
        path = _write_workbook(
            tmp_path / "timesheet.xlsx",
            [
                ["01/01/2024", "5h 00m (13:00:00 - 18:00:00 )", "Alpha", "Build", "api", "Approved"],
                ["02/01/2024", "8h 00m", None, None, None, "Pending"],
            ],
        )

        data = excel_reader.load_timesheet_file(path)

        assert data.source_file == "timesheet.xlsx"
        assert data.rows == [
            RawEntry(
                date="01/01/2024",
                hours_worked="5h 00m (13:00:00 - 18:00:00 )",
                project_name="Alpha",
                task="Build",
                task_detail="api",
                status="Approved",
            ),
            RawEntry(date="02/01/2024", hours_worked="8h 00m", status="Pending"),
        ]

    def test_date_cells_rendered_day_first(self, tmp_path):
        path = _write_workbook(
            tmp_path / "timesheet.xlsx",
            [[datetime(2024, 3, 5), "1h 00m", "Alpha", "Build", None, "Approved"]],
        )

        data = excel_reader.load_timesheet_file(path)

        assert data.rows[0].date == "05/03/2024"

    def test_blank_rows_skipped(self, tmp_path):
        path = _write_workbook(
            tmp_path / "timesheet.xlsx",
            [
                ["01/01/2024", "1h 00m", "Alpha", "Build", None, "Approved"],
                [None, None, None, None, None, None],
                ["03/01/2024", "2h 00m", "Alpha", "Build", None, "Approved"],
            ],
        )

        data = excel_reader.load_timesheet_file(path)

        assert [row.date for row in data.rows] == ["01/01/2024", "03/01/2024"]

    def test_optional_task_detail_column(self, tmp_path):
        header = [column for column in HEADER if column != "Task Detail"]
        path = _write_workbook(
            tmp_path / "timesheet.xlsx",
            [["01/01/2024", "1h 00m", "Alpha", "Build", "Approved"]],
            header=header,
        )

        data = excel_reader.load_timesheet_file(path)

        assert data.rows[0].task_detail == ""
        assert data.rows[0].status == "Approved"

    def test_header_only_gives_no_rows(self, tmp_path):
        path = _write_workbook(tmp_path / "timesheet.xlsx", [])

        data = excel_reader.load_timesheet_file(path)

        assert data.rows == []

    def test_csv_file(self, tmp_path):
        path = tmp_path / "timesheet.csv"
        lines = ["Timesheet", "Employee,Jane Doe", "Period,January 2024", "Generated,x"]
        lines.append(",".join(HEADER))
        lines.append("01/01/2024,2h 30m,Alpha,Build,,Approved")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

        data = excel_reader.load_timesheet_file(path)

        assert data.rows == [
            RawEntry(
                date="01/01/2024",
                hours_worked="2h 30m",
                project_name="Alpha",
                task="Build",
                status="Approved",
            )
        ]

    def test_csv_comma_only_rows_skipped(self, tmp_path):
        """Rows of bare separators are blank rows, not empty entries."""
        path = tmp_path / "timesheet.csv"
        lines = ["Timesheet", "Employee,Jane Doe", "Period,January 2024", "Generated,x"]
        lines.append(",".join(HEADER))
        lines.append("01/01/2024,8h 00m,Alpha,Build,,Approved")
        lines.append(",,,,,")
        lines.append(" , ,,,,")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

        data = excel_reader.load_timesheet_file(path)

        assert [row.project_name for row in data.rows] == ["Alpha"]
        assert data.blank_rows_skipped == 2


class TestDecodeFailures:
    """Decode failures surface as a single error."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(excel_reader.TimesheetDecodeError, match="does not exist"):
            excel_reader.load_timesheet_file(tmp_path / "missing.xlsx")

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "timesheet.txt"
        path.write_text("hello", encoding="utf-8")

        with pytest.raises(excel_reader.TimesheetDecodeError, match="unsupported type"):
            excel_reader.load_timesheet_file(path)

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "timesheet.xlsx"
        path.write_bytes(b"not a workbook")

        with pytest.raises(excel_reader.TimesheetDecodeError, match="could not be read"):
            excel_reader.load_timesheet_file(path)

    def test_missing_required_columns(self, tmp_path):
        path = _write_workbook(
            tmp_path / "timesheet.xlsx",
            [["01/01/2024", "Alpha"]],
            header=["Date", "Project Name"],
        )

        with pytest.raises(excel_reader.TimesheetDecodeError, match="Hours Worked"):
            excel_reader.load_timesheet_file(path)
