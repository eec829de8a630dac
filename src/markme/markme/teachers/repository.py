from __future__ import annotations

from typing import Protocol, Sequence

from .model import TeacherInfo


class TeacherInfoRepository(Protocol):
    def list_all(self) -> Sequence[TeacherInfo]:
        raise NotImplementedError

    def save_all(self, infos: Sequence[TeacherInfo]) -> None:
        raise NotImplementedError
