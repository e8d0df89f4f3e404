from .store import DocumentStorePort, WriteBatchPort

__all__ = [
    "DocumentStorePort",
    "WriteBatchPort",
]
