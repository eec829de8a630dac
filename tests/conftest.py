from __future__ import annotations

import pytest

from src.markme.markme.container import build_container


@pytest.fixture
def load_errors():
    return []


@pytest.fixture
def container(tmp_path, load_errors):
    return build_container(
        data_dir=tmp_path,
        seed_defaults=True,
        on_load_error=lambda path, exc: load_errors.append((path.name, exc)),
    )


@pytest.fixture
def store(container):
    return container.store
