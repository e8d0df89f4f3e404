from __future__ import annotations

import json
import sqlite3
import uuid as _uuid
from typing import Any, Dict, List, Optional, Tuple


class SqliteWriteBatch:
    """Queued writes applied in a single transaction on commit()."""

    def __init__(self, repo: "ProfessionalsRepo"):
        self.repo = repo
        self._ops: List[Tuple[str, Dict[str, Any], bool]] = []

    def upsert(self, doc_id: str, data: Dict[str, Any]) -> None:
        self._ops.append((doc_id, dict(data), True))

    def insert(self, data: Dict[str, Any]) -> str:
        doc_id = _uuid.uuid4().hex
        self._ops.append((doc_id, dict(data), False))
        return doc_id

    def commit(self) -> None:
        ops, self._ops = self._ops, []
        # Context manager commits on success and rolls the whole batch back on error
        with self.repo.conn:
            for doc_id, data, merge in ops:
                self.repo.write_document(doc_id, data, merge=merge)


class ProfessionalsRepo:
    """Local document store for professionals backed by SQLite."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def batch(self) -> SqliteWriteBatch:
        return SqliteWriteBatch(self)

    def write_document(self, doc_id: str, data: Dict[str, Any], merge: bool = True) -> None:
        """Insert or update one document; caller owns the transaction.

        With ``merge`` the stored fields missing from ``data`` are kept, the
        others are replaced wholesale (arrays included).
        """
        body: Dict[str, Any] = {}
        if merge:
            existing = self.get(doc_id)
            if existing:
                existing.pop("id", None)
                body.update(existing)
        body.update(data)

        cur = self.conn.cursor()
        cur.execute(
            (
                "INSERT INTO professionals (id, category, data_json) VALUES (?, ?, ?) "
                "ON CONFLICT(id) DO UPDATE SET "
                " category = excluded.category, "
                " data_json = excluded.data_json, "
                " updated_at = datetime('now')"
            ),
            (doc_id, str(body.get("category") or ""), json.dumps(body, ensure_ascii=False)),
        )
        cur.execute("DELETE FROM professional_location_tokens WHERE professional_id = ?", (doc_id,))
        tokens = body.get("locationSearch")
        if isinstance(tokens, list):
            cur.executemany(
                "INSERT OR IGNORE INTO professional_location_tokens (professional_id, token) VALUES (?, ?)",
                [(doc_id, str(t)) for t in tokens if t],
            )

    def get(self, doc_id: str) -> Optional[Dict[str, Any]]:
        cur = self.conn.cursor()
        cur.execute("SELECT data_json FROM professionals WHERE id = ?", (doc_id,))
        row = cur.fetchone()
        if not row:
            return None
        doc = json.loads(row[0])
        doc["id"] = doc_id
        return doc

    def query(self, category: str, token: str, limit: int) -> List[Dict[str, Any]]:
        sql = (
            "SELECT p.id, p.data_json FROM professionals p "
            "JOIN professional_location_tokens t ON t.professional_id = p.id "
            "WHERE p.category = ? AND t.token = ? "
            "ORDER BY p.id LIMIT ?"
        )
        cur = self.conn.cursor()
        cur.execute(sql, (category, token, limit))
        out: List[Dict[str, Any]] = []
        for doc_id, data_json in cur.fetchall():
            doc = json.loads(data_json)
            doc["id"] = doc_id
            out.append(doc)
        return out

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM professionals")
        return int(cur.fetchone()[0])
