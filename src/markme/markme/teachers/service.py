from __future__ import annotations

from ..common.log import get_logger
from .model import TeacherInfo
from .repository import TeacherInfoRepository

log = get_logger("teachers")


class TeacherService:
    """Use cases on the class -> teacher metadata document."""

    def __init__(self, teachers: TeacherInfoRepository):
        self._teachers = teachers

    def get_teacher_info(self, class_name: str) -> TeacherInfo:
        """Return the stored record, materialising an empty one on first access."""

        infos = list(self._teachers.list_all())
        for info in infos:
            if info.class_name == class_name:
                return info

        info = TeacherInfo.empty(class_name)
        infos.append(info)
        self._teachers.save_all(infos)
        log.info("Created empty teacher info for %r", class_name)
        return info

    def save_teacher_info(self, info: TeacherInfo) -> None:
        infos = list(self._teachers.list_all())
        for i, existing in enumerate(infos):
            if existing.class_name == info.class_name:
                infos[i] = info
                break
        else:
            infos.append(info)
        self._teachers.save_all(infos)
        log.info("Saved teacher info for %r", info.class_name)

    def delete_for_class(self, class_name: str) -> None:
        infos = [t for t in self._teachers.list_all() if t.class_name != class_name]
        self._teachers.save_all(infos)

    def rename_class(self, old_name: str, new_name: str) -> None:
        infos = list(self._teachers.list_all())
        for i, info in enumerate(infos):
            if info.class_name == old_name:
                infos[i] = info.renamed(new_name)
                self._teachers.save_all(infos)
                return
