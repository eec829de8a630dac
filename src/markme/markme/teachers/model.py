from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TeacherInfo:
    """Teacher metadata for one class.

    ``class_name`` refers to a roster entry but is not enforced as a foreign key.
    """

    class_name: str
    teacher: str = ""
    co_teacher: str = ""
    description: str = ""

    @classmethod
    def empty(cls, class_name: str) -> "TeacherInfo":
        return cls(class_name=class_name)

    def renamed(self, class_name: str) -> "TeacherInfo":
        return replace(self, class_name=class_name)
