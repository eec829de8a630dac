from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.markme.markme.storage.bootstrap import ensure_default_documents, list_documents
from src.markme.markme.storage.documents import JsonDocumentStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    documents = JsonDocumentStore(settings.DATA_DIR)

    seeded = ensure_default_documents(documents)
    print(
        f"OK: Seeded {len(seeded)} document(s) -> {documents.data_dir} "
        f"(present={', '.join(list_documents(documents)) or '-'})"
    )


if __name__ == "__main__":
    main()
