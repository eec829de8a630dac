from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional, Union

from ..common.log import get_logger
from ..core.constants import JSON_INDENT
from ..core.enums import DocumentName
from ..core.exceptions import StorageError

log = get_logger("storage")

LoadErrorHook = Callable[[Path, Exception], None]


class JsonDocumentStore:
    """Reads and writes the store's flat JSON documents under one directory.

    Missing documents read as ``default_factory()``. Unreadable documents (bad JSON,
    wrong top-level type) read the same way; the failure is passed to
    ``on_load_error`` when given, otherwise logged. Write failures raise
    :class:`StorageError`.
    """

    def __init__(self, data_dir: Union[str, Path], *, on_load_error: Optional[LoadErrorHook] = None):
        self._data_dir = Path(data_dir)
        self._on_load_error = on_load_error

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: DocumentName) -> Path:
        return self._data_dir / name.value

    def exists(self, name: DocumentName) -> bool:
        return self.path_for(name).is_file()

    def load(self, name: DocumentName, *, default_factory: Callable[[], Any]) -> Any:
        path = self.path_for(name)
        if not path.is_file():
            return default_factory()

        expected = type(default_factory())
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if data is None:
                return default_factory()
            if not isinstance(data, expected):
                raise ValueError(f"Expected {name.value} to contain a {expected.__name__}, got {type(data).__name__}")
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors.
            self.report_load_error(name, exc)
            return default_factory()
        return data

    def save(self, name: DocumentName, data: Any) -> None:
        path = self.path_for(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            log.error("Failed to write %s: %s", path, exc)
            raise StorageError(f"Failed to write {path}") from exc
        log.debug("Wrote %s", path)

    def report_load_error(self, name: DocumentName, exc: Exception) -> None:
        path = self.path_for(name)
        if self._on_load_error is not None:
            self._on_load_error(path, exc)
        else:
            log.warning("Ignoring unreadable document %s: %s", path, exc)
