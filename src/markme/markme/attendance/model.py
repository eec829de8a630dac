from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class StudentAttendanceEntry:
    """One student's mark for a day. ``status`` is an opaque code."""

    name: str
    status: str = AttendanceStatus.ABSENT.value


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance for one class on one calendar date."""

    class_name: str
    date: date
    students: tuple[StudentAttendanceEntry, ...] = field(default_factory=tuple)
