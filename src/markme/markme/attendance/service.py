from __future__ import annotations

from typing import Iterable

from ..classes.service import RosterService
from ..common.datetime_utils import DateLike, format_date_key, to_calendar_date
from ..common.log import get_logger
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, StudentAttendanceEntry
from .repository import AttendanceIndexRepository

log = get_logger("attendance")


class AttendanceService:
    """Reads and writes daily attendance, keeping both indices in step.

    A save replaces the record for the same (date, class) in the by-date
    index first, then in the by-class index. The two writes are separate
    file operations.
    """

    def __init__(self, attendance: AttendanceIndexRepository, rosters: RosterService):
        self._attendance = attendance
        self._rosters = rosters

    def get_attendance(self, day: DateLike, class_name: str) -> list[StudentAttendanceEntry]:
        # A stored record wins over the current roster, even if the roster changed since.
        key = format_date_key(day)
        for record in self._attendance.load_by_date().get(key, []):
            if record.class_name == class_name:
                return list(record.students)

        return [
            StudentAttendanceEntry(name=name, status=AttendanceStatus.ABSENT.value)
            for name in self._rosters.list_students(class_name)
        ]

    def save_attendance(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        record = _build_record(day, class_name, students)
        self._write_by_date(record)
        self._write_by_class(record)
        log.info("Saved attendance for %r on %s (%d students)", class_name, record.date, len(record.students))
        return record

    def save_attendance_by_date(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        record = _build_record(day, class_name, students)
        self._write_by_date(record)
        return record

    def save_attendance_by_class(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        record = _build_record(day, class_name, students)
        self._write_by_class(record)
        return record

    def list_attendance_for_date(self, day: DateLike) -> list[AttendanceRecord]:
        return list(self._attendance.load_by_date().get(format_date_key(day), []))

    def list_attendance_for_class(self, class_name: str) -> list[AttendanceRecord]:
        return list(self._attendance.load_by_class().get(class_name, []))

    def _write_by_date(self, record: AttendanceRecord) -> None:
        index = self._attendance.load_by_date()
        key = format_date_key(record.date)
        kept = [r for r in index.get(key, []) if r.class_name != record.class_name]
        index[key] = kept + [record]
        self._attendance.save_by_date(index)

    def _write_by_class(self, record: AttendanceRecord) -> None:
        index = self._attendance.load_by_class()
        kept = [r for r in index.get(record.class_name, []) if r.date != record.date]
        index[record.class_name] = kept + [record]
        self._attendance.save_by_class(index)


def _build_record(day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
    return AttendanceRecord(
        class_name=class_name,
        date=to_calendar_date(day),
        students=tuple(StudentAttendanceEntry(name=s.name, status=s.status) for s in students),
    )
