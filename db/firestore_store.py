from __future__ import annotations

from typing import Any, Dict, List, Optional


class FirestoreWriteBatch:
    def __init__(self, client: Any, collection: Any):
        self._batch = client.batch()
        self._collection = collection

    def upsert(self, doc_id: str, data: Dict[str, Any]) -> None:
        self._batch.set(self._collection.document(doc_id), data, merge=True)

    def insert(self, data: Dict[str, Any]) -> str:
        ref = self._collection.document()
        self._batch.set(ref, data)
        return ref.id

    def commit(self) -> None:
        self._batch.commit()


class FirestoreStore:
    """Professionals collection in Cloud Firestore (firebase-admin).

    The two-predicate query needs the composite index from
    firestore.indexes.json (category ASC, locationSearch CONTAINS).
    """

    def __init__(self, client: Any, collection_name: str = "professionals"):
        self.client = client
        self.collection_name = collection_name
        self.collection = client.collection(collection_name)

    @classmethod
    def from_credentials(cls, credentials_path: Optional[str], collection_name: str = "professionals") -> "FirestoreStore":
        import firebase_admin
        from firebase_admin import credentials, firestore

        if not credentials_path:
            raise RuntimeError("GOOGLE_APPLICATION_CREDENTIALS is required for the firestore backend")
        try:
            app = firebase_admin.get_app()
        except ValueError:
            app = firebase_admin.initialize_app(credentials.Certificate(credentials_path))
        return cls(firestore.client(app), collection_name)

    def batch(self) -> FirestoreWriteBatch:
        return FirestoreWriteBatch(self.client, self.collection)

    def get(self, doc_id: str) -> Optional[Dict[str, Any]]:
        snap = self.collection.document(doc_id).get()
        if not snap.exists:
            return None
        doc = snap.to_dict() or {}
        doc["id"] = snap.id
        return doc

    def query(self, category: str, token: str, limit: int) -> List[Dict[str, Any]]:
        from google.cloud.firestore_v1.base_query import FieldFilter

        q = (
            self.collection
            .where(filter=FieldFilter("category", "==", category))
            .where(filter=FieldFilter("locationSearch", "array_contains", token))
            .limit(limit)
        )
        out: List[Dict[str, Any]] = []
        for snap in q.stream():
            doc = snap.to_dict() or {}
            doc["id"] = snap.id
            out.append(doc)
        return out
