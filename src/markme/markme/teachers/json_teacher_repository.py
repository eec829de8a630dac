from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import DocumentName
from ..storage.documents import JsonDocumentStore
from .model import TeacherInfo
from .repository import TeacherInfoRepository


class JsonTeacherInfoRepository(TeacherInfoRepository):
    def __init__(self, documents: JsonDocumentStore):
        self._documents = documents

    def list_all(self) -> Sequence[TeacherInfo]:
        rows = self._documents.load(DocumentName.CLASS_TEACHERS, default_factory=list)
        infos = []
        for r in rows:
            info = self._from_row(r)
            if info is None:
                self._documents.report_load_error(
                    DocumentName.CLASS_TEACHERS, ValueError(f"Skipping unusable teacher row: {r!r}")
                )
                continue
            infos.append(info)
        return infos

    def save_all(self, infos: Sequence[TeacherInfo]) -> None:
        self._documents.save(
            DocumentName.CLASS_TEACHERS,
            [
                {
                    "ClassName": t.class_name,
                    "Teacher": t.teacher,
                    "CoTeacher": t.co_teacher,
                    "Description": t.description,
                }
                for t in infos
            ],
        )

    @staticmethod
    def _from_row(r: Any) -> Optional[TeacherInfo]:
        if not isinstance(r, dict) or not isinstance(r.get("ClassName"), str):
            return None
        return TeacherInfo(
            class_name=r["ClassName"],
            teacher=str(r.get("Teacher") or ""),
            co_teacher=str(r.get("CoTeacher") or ""),
            description=str(r.get("Description") or ""),
        )
