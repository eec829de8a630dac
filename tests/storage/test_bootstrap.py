from __future__ import annotations

import json

from src.markme.markme.core.enums import DocumentName
from src.markme.markme.storage.bootstrap import ensure_default_documents, list_documents
from src.markme.markme.storage.documents import JsonDocumentStore


def test_seeds_missing_roster_and_teacher_documents(tmp_path):
    documents = JsonDocumentStore(tmp_path)

    seeded = ensure_default_documents(documents)

    assert seeded == [DocumentName.CLASSES, DocumentName.CLASS_TEACHERS]
    classes = json.loads((tmp_path / "classes.json").read_text(encoding="utf-8"))
    assert [c["ClassName"] for c in classes] == ["Class 1", "Class 2", "Class 3"]
    assert classes[0]["Students"] == ["Alice", "Bob", "Charlie", "Diana"]
    teachers = json.loads((tmp_path / "class_teachers.json").read_text(encoding="utf-8"))
    assert teachers[1] == {
        "ClassName": "Class 2",
        "Teacher": "Ms. Brown",
        "CoTeacher": "Mr. White",
        "Description": "Mathematics essentials",
    }
    assert list_documents(documents) == ["classes.json", "class_teachers.json"]


def test_existing_documents_are_left_alone(tmp_path):
    (tmp_path / "classes.json").write_text("[]", encoding="utf-8")
    documents = JsonDocumentStore(tmp_path)

    seeded = ensure_default_documents(documents)

    assert seeded == [DocumentName.CLASS_TEACHERS]
    assert (tmp_path / "classes.json").read_text(encoding="utf-8") == "[]"
