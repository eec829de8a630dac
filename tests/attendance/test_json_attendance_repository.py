from __future__ import annotations

import json
from datetime import date

import pytest

from src.markme.markme.attendance.json_attendance_repository import JsonAttendanceRepository
from src.markme.markme.attendance.model import AttendanceRecord, StudentAttendanceEntry
from src.markme.markme.attendance.service import AttendanceService
from src.markme.markme.classes.json_class_repository import JsonClassRosterRepository
from src.markme.markme.classes.service import RosterService
from src.markme.markme.storage.documents import JsonDocumentStore
from src.markme.markme.teachers.json_teacher_repository import JsonTeacherInfoRepository
from src.markme.markme.teachers.service import TeacherService


def _repo(tmp_path, errors=None):
    hook = (lambda path, exc: errors.append(exc)) if errors is not None else None
    return JsonAttendanceRepository(JsonDocumentStore(tmp_path, on_load_error=hook))


def test_missing_documents_load_empty(tmp_path):
    repo = _repo(tmp_path)

    assert repo.load_by_date() == {}
    assert repo.load_by_class() == {}


def test_written_layout(tmp_path):
    repo = _repo(tmp_path)
    record = AttendanceRecord("Class 2", date(2024, 1, 10), (StudentAttendanceEntry("Ethan", "P"),))

    repo.save_by_date({"2024-01-10": [record]})
    repo.save_by_class({"Class 2": [record]})

    expected_row = {
        "ClassName": "Class 2",
        "Date": "2024-01-10T00:00:00",
        "Students": [{"Name": "Ethan", "Status": "P"}],
    }
    by_date = json.loads((tmp_path / "attendance_by_date.json").read_text(encoding="utf-8"))
    by_class = json.loads((tmp_path / "attendance_by_class.json").read_text(encoding="utf-8"))
    assert by_date == {"2024-01-10": [expected_row]}
    assert by_class == {"Class 2": [expected_row]}

    assert repo.load_by_date() == {"2024-01-10": [record]}


def test_reads_plain_iso_dates(tmp_path):
    (tmp_path / "attendance_by_class.json").write_text(
        json.dumps({"Class 1": [{"ClassName": "Class 1", "Date": "2024-01-10", "Students": []}]}),
        encoding="utf-8",
    )

    [record] = _repo(tmp_path).load_by_class()["Class 1"]

    assert record.date == date(2024, 1, 10)
    assert record.students == ()


def test_unusable_rows_are_skipped_and_reported(tmp_path):
    errors = []
    (tmp_path / "attendance_by_date.json").write_text(
        json.dumps(
            {
                "2024-01-10": [
                    {"ClassName": "Class 1", "Date": "not a date", "Students": []},
                    {"ClassName": "Class 2", "Date": "2024-01-10T00:00:00", "Students": [{"Name": "Ethan"}]},
                ],
                "2024-01-11": "garbage",
            }
        ),
        encoding="utf-8",
    )

    index = _repo(tmp_path, errors).load_by_date()

    assert list(index) == ["2024-01-10"]
    [record] = index["2024-01-10"]
    assert record.class_name == "Class 2"
    assert record.students == (StudentAttendanceEntry("Ethan", "A"),)
    assert len(errors) == 2


def test_malformed_document_reads_as_empty(tmp_path):
    errors = []
    (tmp_path / "attendance_by_date.json").write_text("{ not json", encoding="utf-8")

    assert _repo(tmp_path, errors).load_by_date() == {}
    assert len(errors) == 1


@pytest.mark.parametrize("stored_date", ["2024-01-10T09:15:30.1234567", "2024-01-10T00:00:00Z", "2024-01-10T00:00:00+07:00"])
def test_reads_dates_with_any_time_part(tmp_path, stored_date):
    errors = []
    (tmp_path / "attendance_by_date.json").write_text(
        json.dumps({"2024-01-10": [{"ClassName": "Class 1", "Date": stored_date, "Students": [{"Name": "Alice", "Status": "P"}]}]}),
        encoding="utf-8",
    )
    repo = _repo(tmp_path, errors)

    [record] = repo.load_by_date()["2024-01-10"]

    assert record.date == date(2024, 1, 10)
    assert errors == []


def test_record_with_time_part_survives_saving_another_class(tmp_path):
    (tmp_path / "attendance_by_date.json").write_text(
        json.dumps({"2024-01-10": [{"ClassName": "Class 1", "Date": "2024-01-10T09:15:30.1234567", "Students": []}]}),
        encoding="utf-8",
    )
    documents = JsonDocumentStore(tmp_path)
    repo = JsonAttendanceRepository(documents)
    svc = AttendanceService(repo, RosterService(JsonClassRosterRepository(documents), TeacherService(JsonTeacherInfoRepository(documents))))

    svc.save_attendance(date(2024, 1, 10), "Class 2", [StudentAttendanceEntry("Ethan", "P")])

    assert [r.class_name for r in repo.load_by_date()["2024-01-10"]] == ["Class 1", "Class 2"]


def test_date_with_unexpected_suffix_is_rejected(tmp_path):
    errors = []
    (tmp_path / "attendance_by_class.json").write_text(
        json.dumps({"Class 1": [{"ClassName": "Class 1", "Date": "2024-01-10junk", "Students": []}]}),
        encoding="utf-8",
    )

    assert _repo(tmp_path, errors).load_by_class() == {"Class 1": []}
    assert len(errors) == 1
