"""Shared fixtures for timesheet summary tests."""
import pytest

from timesheet_summary.utilities.models import RawEntry


@pytest.fixture
def make_row():
    """Factory for RawEntry rows with approved defaults."""

    def _make_row(
        date="01/01/2024",
        hours="8h 00m",
        project="Alpha",
        task="Build",
        status="Approved",
        detail="",
    ):
        return RawEntry(
            date=date,
            hours_worked=hours,
            project_name=project,
            task=task,
            task_detail=detail,
            status=status,
        )

    return _make_row
