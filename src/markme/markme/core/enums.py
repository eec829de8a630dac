from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Well-known status codes.

    The store treats statuses as opaque strings; only ABSENT is used internally
    as the default for students without a saved record.
    """

    ABSENT = "A"
    PRESENT = "P"


class DocumentName(str, Enum):
    """Logical documents owned by the store, valued by their file name."""

    CLASSES = "classes.json"
    CLASS_TEACHERS = "class_teachers.json"
    ATTENDANCE_BY_DATE = "attendance_by_date.json"
    ATTENDANCE_BY_CLASS = "attendance_by_class.json"
