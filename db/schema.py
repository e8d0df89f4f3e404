from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the local document-store schema and indexes (idempotent)."""
    cur = conn.cursor()

    # One row per document; the JSON body holds every stored field
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS professionals (\n"
            "  id TEXT PRIMARY KEY,\n"
            "  category TEXT NOT NULL DEFAULT '',\n"
            "  data_json TEXT NOT NULL,\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now')),\n"
            "  updated_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_professionals_category ON professionals(category);")

    # Array membership for locationSearch, mirrors the (category, locationSearch) composite index
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS professional_location_tokens (\n"
            "  professional_id TEXT NOT NULL,\n"
            "  token TEXT NOT NULL,\n"
            "  PRIMARY KEY (professional_id, token),\n"
            "  FOREIGN KEY(professional_id) REFERENCES professionals(id) ON DELETE CASCADE\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_location_tokens_token ON professional_location_tokens(token);")

    conn.commit()
