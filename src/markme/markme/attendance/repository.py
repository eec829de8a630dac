from __future__ import annotations

from typing import Dict, List, Protocol

from .model import AttendanceRecord

# key -> records in stored order; the key is a YYYY-MM-DD date or a class name
AttendanceIndex = Dict[str, List[AttendanceRecord]]


class AttendanceIndexRepository(Protocol):
    """Repository interface for the two attendance projections.

    Both indices hold the same facts: one keyed by date, one keyed by class
    name. Each is read and rewritten as a whole document.
    """

    def load_by_date(self) -> AttendanceIndex:
        raise NotImplementedError

    def save_by_date(self, index: AttendanceIndex) -> None:
        raise NotImplementedError

    def load_by_class(self) -> AttendanceIndex:
        raise NotImplementedError

    def save_by_class(self, index: AttendanceIndex) -> None:
        raise NotImplementedError
