from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import DocumentName
from ..storage.documents import JsonDocumentStore
from .model import ClassRoster
from .repository import ClassRosterRepository


class JsonClassRosterRepository(ClassRosterRepository):
    def __init__(self, documents: JsonDocumentStore):
        self._documents = documents

    def list_all(self) -> Sequence[ClassRoster]:
        rows = self._documents.load(DocumentName.CLASSES, default_factory=list)
        rosters = []
        for r in rows:
            roster = self._from_row(r)
            if roster is None:
                self._documents.report_load_error(DocumentName.CLASSES, ValueError(f"Skipping unusable class row: {r!r}"))
                continue
            rosters.append(roster)
        return rosters

    def save_all(self, rosters: Sequence[ClassRoster]) -> None:
        self._documents.save(
            DocumentName.CLASSES,
            [{"ClassName": c.class_name, "Students": list(c.students)} for c in rosters],
        )

    @staticmethod
    def _from_row(r: Any) -> Optional[ClassRoster]:
        if not isinstance(r, dict) or not isinstance(r.get("ClassName"), str):
            return None
        students = r.get("Students") or []
        if not isinstance(students, list) or not all(isinstance(s, str) for s in students):
            return None
        return ClassRoster(class_name=r["ClassName"], students=tuple(students))
