from __future__ import annotations

from typing import Any

from ..common.datetime_utils import format_record_date, parse_iso_date
from ..core.enums import AttendanceStatus, DocumentName
from ..storage.documents import JsonDocumentStore
from .model import AttendanceRecord, StudentAttendanceEntry
from .repository import AttendanceIndex, AttendanceIndexRepository


class JsonAttendanceRepository(AttendanceIndexRepository):
    def __init__(self, documents: JsonDocumentStore):
        self._documents = documents

    def load_by_date(self) -> AttendanceIndex:
        return self._load(DocumentName.ATTENDANCE_BY_DATE)

    def save_by_date(self, index: AttendanceIndex) -> None:
        self._documents.save(DocumentName.ATTENDANCE_BY_DATE, _index_to_document(index))

    def load_by_class(self) -> AttendanceIndex:
        return self._load(DocumentName.ATTENDANCE_BY_CLASS)

    def save_by_class(self, index: AttendanceIndex) -> None:
        self._documents.save(DocumentName.ATTENDANCE_BY_CLASS, _index_to_document(index))

    def _load(self, name: DocumentName) -> AttendanceIndex:
        document = self._documents.load(name, default_factory=dict)
        index: AttendanceIndex = {}
        for key, rows in document.items():
            if not isinstance(rows, list):
                self._documents.report_load_error(name, ValueError(f"Skipping non-list entry under {key!r}"))
                continue

            records = []
            for r in rows:
                try:
                    records.append(_record_from_row(r))
                except (KeyError, TypeError, ValueError) as exc:
                    self._documents.report_load_error(name, ValueError(f"Skipping unusable record under {key!r}: {exc}"))
            index[key] = records
        return index


def _record_from_row(r: Any) -> AttendanceRecord:
    if not isinstance(r, dict):
        raise TypeError(f"record must be an object, got {type(r).__name__}")
    class_name = r["ClassName"]
    if not isinstance(class_name, str):
        raise TypeError("ClassName must be a string")

    students = []
    for s in r.get("Students") or []:
        students.append(
            StudentAttendanceEntry(
                name=str(s["Name"]),
                status=str(s.get("Status") or AttendanceStatus.ABSENT.value),
            )
        )

    return AttendanceRecord(class_name=class_name, date=parse_iso_date(str(r["Date"])), students=tuple(students))


def _record_to_row(record: AttendanceRecord) -> dict:
    return {
        "ClassName": record.class_name,
        "Date": format_record_date(record.date),
        "Students": [{"Name": s.name, "Status": s.status} for s in record.students],
    }


def _index_to_document(index: AttendanceIndex) -> dict:
    return {key: [_record_to_row(r) for r in records] for key, records in index.items()}
