from __future__ import annotations

from datetime import datetime

from gradeboard.domain.logic.statistics import round_half_up
from gradeboard.domain.models.entities import PassFailStats, Result, StudentRecord

NO_STUDENTS = "No students in the system"
SORTED = "Students sorted by total marks (highest to lowest)"
DELETED = "Student deleted successfully"
NOT_FOUND = "Student not found"


def format_total(total: float) -> str:
    return f"{round_half_up(total):.1f}"


def format_clock(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def added_message(record: StudentRecord) -> str:
    return f"Added {record.name} (Total: {format_total(record.total)}, Grade: {record.grade.value})"


def average_message(result: Result[float], count: int) -> str:
    if not result.ok:
        return "No students to calculate average"
    return f"Class Average: {format_total(result.value)} (based on {count} students)"


def top_performer_message(result: Result[StudentRecord]) -> str:
    if not result.ok:
        return "No students to highlight"
    top = result.value
    return f"Top Student: {top.name} (Total: {format_total(top.total)}, Grade: {top.grade.value})"


def pass_fail_message(result: Result[PassFailStats]) -> str:
    if not result.ok:
        return "No students to analyze"
    stats = result.value
    return (
        f"Pass: {stats.pass_count} ({stats.pass_pct:.1f}%) | "
        f"Fail: {stats.fail_count} ({stats.fail_pct:.1f}%)"
    )


def delete_message(deleted: bool) -> str:
    return DELETED if deleted else NOT_FOUND
