from __future__ import annotations

import asyncio
from typing import Iterable

from .attendance.model import AttendanceRecord, StudentAttendanceEntry
from .attendance.service import AttendanceService
from .classes.model import ClassRoster
from .classes.service import RosterService
from .common.datetime_utils import DateLike
from .teachers.model import TeacherInfo
from .teachers.service import TeacherService


class AttendanceStore:
    """Single entry point for callers (UI, scripts).

    Every call rereads the documents it needs from disk; nothing is cached
    between calls, so out-of-process edits are always picked up.
    """

    def __init__(self, rosters: RosterService, teachers: TeacherService, attendance: AttendanceService):
        self._rosters = rosters
        self._teachers = teachers
        self._attendance = attendance

    # --- classes and students ---

    def list_class_names(self) -> list[str]:
        return self._rosters.list_class_names()

    def list_classes(self) -> list[ClassRoster]:
        return self._rosters.list_classes()

    def list_students(self, class_name: str) -> list[str]:
        return self._rosters.list_students(class_name)

    def add_class(self, class_name: str) -> None:
        self._rosters.add_class(class_name)

    def delete_class(self, class_name: str) -> None:
        self._rosters.delete_class(class_name)

    def rename_class(self, old_name: str, new_name: str) -> None:
        self._rosters.rename_class(old_name, new_name)

    def add_student(self, class_name: str, student_name: str) -> None:
        self._rosters.add_student(class_name, student_name)

    def rename_student(self, class_name: str, old_name: str, new_name: str) -> None:
        self._rosters.rename_student(class_name, old_name, new_name)

    def delete_student(self, class_name: str, student_name: str) -> None:
        self._rosters.delete_student(class_name, student_name)

    # --- teachers ---

    def get_teacher_info(self, class_name: str) -> TeacherInfo:
        return self._teachers.get_teacher_info(class_name)

    def save_teacher_info(self, info: TeacherInfo) -> None:
        self._teachers.save_teacher_info(info)

    # --- attendance ---

    def get_attendance(self, day: DateLike, class_name: str) -> list[StudentAttendanceEntry]:
        return self._attendance.get_attendance(day, class_name)

    def save_attendance(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        return self._attendance.save_attendance(day, class_name, students)

    async def save_attendance_async(
        self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]
    ) -> AttendanceRecord:
        """Run :meth:`save_attendance` in a worker thread."""
        # Materialise first so a lazy iterable is not consumed on another thread.
        return await asyncio.to_thread(self._attendance.save_attendance, day, class_name, list(students))

    def save_attendance_by_date(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        return self._attendance.save_attendance_by_date(day, class_name, students)

    def save_attendance_by_class(self, day: DateLike, class_name: str, students: Iterable[StudentAttendanceEntry]) -> AttendanceRecord:
        return self._attendance.save_attendance_by_class(day, class_name, students)

    def list_attendance_for_date(self, day: DateLike) -> list[AttendanceRecord]:
        return self._attendance.list_attendance_for_date(day)

    def list_attendance_for_class(self, class_name: str) -> list[AttendanceRecord]:
        return self._attendance.list_attendance_for_class(class_name)
