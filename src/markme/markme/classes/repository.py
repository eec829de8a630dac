from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassRoster


class ClassRosterRepository(Protocol):
    """Repository interface for the roster document.

    The document is read and rewritten as a whole; the service applies the
    mutation rules on top of these two calls.
    """

    def list_all(self) -> Sequence[ClassRoster]:
        raise NotImplementedError

    def save_all(self, rosters: Sequence[ClassRoster]) -> None:
        raise NotImplementedError
