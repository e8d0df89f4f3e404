from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol


class WriteBatchPort(Protocol):
    def upsert(self, doc_id: str, data: Dict[str, Any]) -> None:
        """Write ``data`` under ``doc_id``, keeping stored fields it does not mention."""
        ...

    def insert(self, data: Dict[str, Any]) -> str:
        """Queue a new document with a store-generated id; returns that id."""
        ...

    def commit(self) -> None:
        ...


class DocumentStorePort(Protocol):
    def batch(self) -> WriteBatchPort:
        ...

    def get(self, doc_id: str) -> Optional[Dict[str, Any]]:
        ...

    def query(self, category: str, token: str, limit: int) -> List[Dict[str, Any]]:
        """Documents with ``category == category`` and ``token`` in ``locationSearch``."""
        ...
