from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .common.log import configure_logging, get_logger
from .container import build_container
from .storage.bootstrap import list_documents
from .storage.documents import LoadErrorHook
from .store import AttendanceStore

log = get_logger("main")


def create_store(*, settings_module: Optional[str] = None, on_load_error: Optional[LoadErrorHook] = None) -> AttendanceStore:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    data_dir = getattr(settings, "DATA_DIR")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))

    container = build_container(
        data_dir=data_dir,
        seed_defaults=bool(getattr(settings, "AUTO_SEED_DATA", False)),
        on_load_error=on_load_error,
    )

    if getattr(settings, "DEBUG", False):
        log.info(
            "settings=%s data_dir=%s documents=%s",
            settings_module,
            container.documents.data_dir,
            list_documents(container.documents),
        )

    return container.store
