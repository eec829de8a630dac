"""Backup the JSON documents.

Note: copies every document present in DATA_DIR into backups/<timestamp>/.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.markme.markme.storage.bootstrap import list_documents
from src.markme.markme.storage.documents import JsonDocumentStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    documents = JsonDocumentStore(settings.DATA_DIR)

    names = list_documents(documents)
    if not names:
        raise SystemExit(f"No documents found in {documents.data_dir}")

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    for name in names:
        shutil.copy2(documents.data_dir / name, out_dir / name)
    print(f"OK: Backup created: {out_dir} ({len(names)} files)")


if __name__ == "__main__":
    main()
