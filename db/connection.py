from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from config.settings import Settings
    from ports.store import DocumentStorePort


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection with sane pragmas for concurrent local use.

    - WAL journal for fewer writer blocks
    - NORMAL synchronous for performance
    - foreign_keys ON to enforce integrity
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    # Pragmas
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    return conn


def get_store(settings: "Settings") -> "DocumentStorePort":
    """Build the document store selected by STORE_BACKEND."""
    if settings.store_backend == "sqlite":
        from db import schema
        from db.repos.professionals_repo import ProfessionalsRepo

        conn = get_connection(settings.db_path)
        schema.bootstrap(conn)
        return ProfessionalsRepo(conn)

    from db.firestore_store import FirestoreStore

    return FirestoreStore.from_credentials(settings.credentials_path, settings.collection)
