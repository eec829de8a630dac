from __future__ import annotations

import json
import logging

import pytest

from src.markme.markme.core.enums import DocumentName
from src.markme.markme.core.exceptions import StorageError
from src.markme.markme.storage.documents import JsonDocumentStore


def test_missing_document_returns_default_without_reporting(tmp_path):
    errors = []
    documents = JsonDocumentStore(tmp_path, on_load_error=lambda path, exc: errors.append(path))

    assert documents.load(DocumentName.CLASSES, default_factory=list) == []
    assert errors == []


@pytest.mark.parametrize("payload", ["{ broken", "{\"ClassName\": \"Class 1\"}", "\xff\xfe"])
def test_unreadable_document_returns_default_and_reports(tmp_path, payload):
    errors = []
    path = tmp_path / "classes.json"
    path.write_bytes(payload.encode("latin-1"))
    documents = JsonDocumentStore(tmp_path, on_load_error=lambda p, exc: errors.append((p, exc)))

    assert documents.load(DocumentName.CLASSES, default_factory=list) == []
    assert [p for p, _ in errors] == [path]


def test_unreadable_document_is_logged_without_hook(tmp_path, caplog):
    (tmp_path / "classes.json").write_text("nope", encoding="utf-8")
    documents = JsonDocumentStore(tmp_path)

    with caplog.at_level(logging.WARNING, logger="markme"):
        assert documents.load(DocumentName.CLASSES, default_factory=list) == []

    assert "classes.json" in caplog.text


def test_save_writes_indented_utf8_and_creates_directory(tmp_path):
    documents = JsonDocumentStore(tmp_path / "nested")

    documents.save(DocumentName.CLASSES, [{"ClassName": "Lớp 1", "Students": ["Zoë"]}])

    text = (tmp_path / "nested" / "classes.json").read_text(encoding="utf-8")
    assert "Lớp 1" in text
    assert "\n  " in text
    assert json.loads(text) == [{"ClassName": "Lớp 1", "Students": ["Zoë"]}]


def test_save_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    documents = JsonDocumentStore(blocker)

    with pytest.raises(StorageError) as excinfo:
        documents.save(DocumentName.CLASSES, [])

    assert isinstance(excinfo.value.__cause__, OSError)
