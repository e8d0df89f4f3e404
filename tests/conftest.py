from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.mapping'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached; tests change env between cases
    from config.settings import get_settings
    monkeypatch.delenv("IMPORT_TRACE", raising=False)
    monkeypatch.delenv("IMPORT_BATCH_SIZE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_env(tmp_path, monkeypatch):
    db_path = tmp_path / "professionals.db"
    monkeypatch.setenv("STORE_BACKEND", "sqlite")
    monkeypatch.setenv("DB_PATH", str(db_path))
    return db_path
