from __future__ import annotations

from typing import Optional

from ..common.log import get_logger
from ..teachers.service import TeacherService
from .model import ClassRoster
from .repository import ClassRosterRepository

log = get_logger("classes")


class RosterService:
    """Use cases on class rosters.

    Mutations on an unknown class or student are silent no-ops; callers that
    need confirmation check with a read first. Class deletion and renaming
    are propagated to the teacher metadata but never to attendance history.
    """

    def __init__(self, rosters: ClassRosterRepository, teachers: TeacherService):
        self._rosters = rosters
        self._teachers = teachers

    def list_classes(self) -> list[ClassRoster]:
        return list(self._rosters.list_all())

    def list_class_names(self) -> list[str]:
        return [c.class_name for c in self._rosters.list_all()]

    def get_roster(self, class_name: str) -> Optional[ClassRoster]:
        for roster in self._rosters.list_all():
            if roster.class_name == class_name:
                return roster
        return None

    def list_students(self, class_name: str) -> list[str]:
        roster = self.get_roster(class_name)
        return list(roster.students) if roster else []

    def add_class(self, class_name: str) -> None:
        rosters = list(self._rosters.list_all())
        if any(c.class_name == class_name for c in rosters):
            log.debug("Class %r already exists", class_name)
            return

        rosters.append(ClassRoster(class_name=class_name))
        self._rosters.save_all(rosters)
        log.info("Added class %r", class_name)

    def delete_class(self, class_name: str) -> None:
        rosters = [c for c in self._rosters.list_all() if c.class_name != class_name]
        self._rosters.save_all(rosters)
        self._teachers.delete_for_class(class_name)
        log.info("Deleted class %r", class_name)

    def rename_class(self, old_name: str, new_name: str) -> None:
        rosters = list(self._rosters.list_all())
        index = self._index_of(rosters, old_name)
        if index is None:
            log.debug("Rename skipped, class %r not found", old_name)
            return

        rosters[index] = rosters[index].renamed(new_name)
        self._rosters.save_all(rosters)
        self._teachers.rename_class(old_name, new_name)
        log.info("Renamed class %r to %r", old_name, new_name)

    def add_student(self, class_name: str, student_name: str) -> None:
        rosters = list(self._rosters.list_all())
        index = self._index_of(rosters, class_name)
        if index is None or student_name in rosters[index].students:
            return

        roster = rosters[index]
        rosters[index] = roster.with_students(roster.students + (student_name,))
        self._rosters.save_all(rosters)
        log.info("Added student %r to %r", student_name, class_name)

    def rename_student(self, class_name: str, old_name: str, new_name: str) -> None:
        rosters = list(self._rosters.list_all())
        index = self._index_of(rosters, class_name)
        if index is None or old_name not in rosters[index].students:
            return

        students = list(rosters[index].students)
        students[students.index(old_name)] = new_name
        rosters[index] = rosters[index].with_students(students)
        self._rosters.save_all(rosters)
        log.info("Renamed student %r to %r in %r", old_name, new_name, class_name)

    def delete_student(self, class_name: str, student_name: str) -> None:
        rosters = list(self._rosters.list_all())
        index = self._index_of(rosters, class_name)
        if index is None:
            return

        roster = rosters[index]
        rosters[index] = roster.with_students(s for s in roster.students if s != student_name)
        self._rosters.save_all(rosters)
        log.info("Removed student %r from %r", student_name, class_name)

    @staticmethod
    def _index_of(rosters: list[ClassRoster], class_name: str) -> Optional[int]:
        for i, roster in enumerate(rosters):
            if roster.class_name == class_name:
                return i
        return None
