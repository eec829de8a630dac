from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ClassRoster:
    """Domain entity: a class and its ordered list of student names."""

    class_name: str
    students: tuple[str, ...] = field(default_factory=tuple)

    def with_students(self, students) -> "ClassRoster":
        return replace(self, students=tuple(students))

    def renamed(self, class_name: str) -> "ClassRoster":
        return replace(self, class_name=class_name)
