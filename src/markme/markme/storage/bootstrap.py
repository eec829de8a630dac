from __future__ import annotations

from ..common.log import get_logger
from ..core.constants import DEFAULT_CLASS_TEACHERS, DEFAULT_CLASSES
from ..core.enums import DocumentName
from .documents import JsonDocumentStore

log = get_logger("bootstrap")


def default_classes_document() -> list[dict]:
    return [{"ClassName": name, "Students": list(students)} for name, students in DEFAULT_CLASSES]


def default_class_teachers_document() -> list[dict]:
    return [
        {"ClassName": name, "Teacher": teacher, "CoTeacher": co_teacher, "Description": description}
        for name, teacher, co_teacher, description in DEFAULT_CLASS_TEACHERS
    ]


def ensure_default_documents(documents: JsonDocumentStore) -> list[DocumentName]:
    """Seed the roster and teacher documents if they are absent.

    Existing files are never touched, even when unreadable. Returns the
    documents that were written.
    """

    seeded: list[DocumentName] = []

    if not documents.exists(DocumentName.CLASSES):
        documents.save(DocumentName.CLASSES, default_classes_document())
        seeded.append(DocumentName.CLASSES)

    if not documents.exists(DocumentName.CLASS_TEACHERS):
        documents.save(DocumentName.CLASS_TEACHERS, default_class_teachers_document())
        seeded.append(DocumentName.CLASS_TEACHERS)

    for name in seeded:
        log.info("Seeded default %s in %s", name.value, documents.data_dir)
    return seeded


def list_documents(documents: JsonDocumentStore) -> list[str]:
    return [name.value for name in DocumentName if documents.exists(name)]
