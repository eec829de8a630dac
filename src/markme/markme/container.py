from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .classes.json_class_repository import JsonClassRosterRepository
from .classes.service import RosterService
from .storage.bootstrap import ensure_default_documents
from .storage.documents import JsonDocumentStore, LoadErrorHook
from .store import AttendanceStore
from .teachers.json_teacher_repository import JsonTeacherInfoRepository
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    documents: JsonDocumentStore

    rosters_repo: JsonClassRosterRepository
    teachers_repo: JsonTeacherInfoRepository
    attendance_repo: JsonAttendanceRepository

    roster_service: RosterService
    teacher_service: TeacherService
    attendance_service: AttendanceService

    store: AttendanceStore


def build_container(
    *,
    data_dir: Union[str, Path],
    seed_defaults: bool = False,
    on_load_error: Optional[LoadErrorHook] = None,
) -> Container:
    documents = JsonDocumentStore(data_dir, on_load_error=on_load_error)
    if seed_defaults:
        ensure_default_documents(documents)

    rosters_repo = JsonClassRosterRepository(documents)
    teachers_repo = JsonTeacherInfoRepository(documents)
    attendance_repo = JsonAttendanceRepository(documents)

    teacher_service = TeacherService(teachers_repo)
    roster_service = RosterService(rosters_repo, teacher_service)
    attendance_service = AttendanceService(attendance_repo, roster_service)

    store = AttendanceStore(roster_service, teacher_service, attendance_service)

    return Container(
        documents=documents,
        rosters_repo=rosters_repo,
        teachers_repo=teachers_repo,
        attendance_repo=attendance_repo,
        roster_service=roster_service,
        teacher_service=teacher_service,
        attendance_service=attendance_service,
        store=store,
    )
