"""Tests for the serial completion projection."""

from datetime import datetime, timedelta, timezone

import pytest

from duesort.models import ScheduleTask
from duesort.scheduler import LateTask, match_timezone, project_completion
from tests.conftest import task

START = datetime(2025, 1, 1)


class TestProjectCompletion:
    """Test project_completion."""

    def test_on_time_tasks_not_reported(self) -> None:
        """Test that tasks finishing by their due date produce no entries."""
        tasks = {"A": task("A", 2, hours=8), "B": task("B", 3, hours=8)}

        assert project_completion(["A", "B"], tasks, START) == []

    def test_partial_days_round_up(self) -> None:
        """Test that any fraction of a working day takes a whole day."""
        tasks = {"A": task("A", 2, hours=9)}  # 2 days -> Jan 3, due Jan 2

        late = project_completion(["A"], tasks, START)

        assert late == [
            LateTask(title="A", projected_completion=datetime(2025, 1, 3), due_date=datetime(2025, 1, 2))
        ]
        assert late[0].days_late == 1

    def test_lateness_accumulates_along_order(self) -> None:
        """Test that each task starts where the previous one ended."""
        tasks = {"A": task("A", 5, hours=16), "B": task("B", 4, hours=16)}

        late = project_completion(["A", "B"], tasks, START)

        assert [t.title for t in late] == ["B"]
        assert late[0].projected_completion == datetime(2025, 1, 5)

    def test_hours_per_day(self) -> None:
        """Test a shorter working day stretches the projection."""
        tasks = {"A": task("A", 3, hours=8)}

        assert project_completion(["A"], tasks, START, working_hours_per_day=8) == []
        assert [t.title for t in project_completion(["A"], tasks, START, 2)] == ["A"]

    def test_rejects_non_positive_hours_per_day(self) -> None:
        """Test that a zero-hour working day is refused."""
        with pytest.raises(ValueError, match="must be positive"):
            project_completion(["A"], {"A": task("A")}, START, working_hours_per_day=0)

    def test_describe(self) -> None:
        """Test the warning text."""
        late = LateTask("Build", datetime(2025, 1, 6), datetime(2025, 1, 3, 12))

        assert late.describe() == (
            "Task 'Build' is projected to finish 3 day(s) after its due date "
            "(2025-01-06 vs 2025-01-03)"
        )

    def test_naive_start_with_aware_due_dates(self) -> None:
        """Test that a naive start is read in the due dates' timezone."""
        tasks = {"A": ScheduleTask("A", 16, datetime(2025, 1, 2, tzinfo=timezone.utc))}

        late = project_completion(["A"], tasks, START)

        assert late[0].projected_completion == datetime(2025, 1, 3, tzinfo=timezone.utc)
        assert late[0].days_late == 1

    def test_aware_start_with_naive_due_dates(self) -> None:
        """Test that an aware start is compared as wall-clock time."""
        tasks = {"A": task("A", 5, hours=8)}

        assert project_completion(["A"], tasks, START.replace(tzinfo=timezone.utc)) == []


class TestMatchTimezone:
    """Test match_timezone."""

    def test_same_awareness_unchanged(self) -> None:
        """Test that comparable datetimes are returned as-is."""
        aware = datetime(2025, 1, 1, 12, tzinfo=timezone.utc)
        other = datetime(2025, 6, 1, tzinfo=timezone(timedelta(hours=2)))

        assert match_timezone(START, datetime(2025, 2, 1)) is START
        assert match_timezone(aware, other) is aware

    def test_naive_takes_reference_zone(self) -> None:
        """Test that a naive datetime gains the reference tzinfo."""
        zone = timezone(timedelta(hours=-5))

        result = match_timezone(datetime(2025, 1, 1, 9), datetime(2025, 1, 2, tzinfo=zone))

        assert result == datetime(2025, 1, 1, 9, tzinfo=zone)

    def test_aware_drops_zone_for_naive_reference(self) -> None:
        """Test that an aware datetime keeps its wall clock but loses its tzinfo."""
        result = match_timezone(datetime(2025, 1, 1, 9, tzinfo=timezone.utc), START)

        assert result == datetime(2025, 1, 1, 9)
        assert result.tzinfo is None
