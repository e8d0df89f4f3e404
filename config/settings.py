from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


# Firestore rejects write batches larger than this
MAX_BATCH_SIZE = 500


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str
    run_env: str

    # Storage
    store_backend: str  # firestore | sqlite
    db_path: str
    credentials_path: str | None
    collection: str

    # Import
    batch_size: int

    # Query surface
    search_limit_default: int
    search_limit_max: int

    # Tracing
    import_trace: bool = False
    import_trace_path: str = "logs/import_batches.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    store_backend = os.getenv("STORE_BACKEND", "firestore").strip().lower()
    if store_backend not in ("firestore", "sqlite"):
        raise RuntimeError(
            f"STORE_BACKEND must be 'firestore' or 'sqlite', got {store_backend!r}"
        )
    batch_size = _as_int("IMPORT_BATCH_SIZE", MAX_BATCH_SIZE)
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        store_backend=store_backend,
        db_path=os.getenv("DB_PATH", "professionals.db"),
        credentials_path=os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None,
        collection=os.getenv("FIRESTORE_COLLECTION", "professionals"),
        batch_size=max(1, min(batch_size, MAX_BATCH_SIZE)),
        search_limit_default=_as_int("SEARCH_LIMIT_DEFAULT", 50),
        search_limit_max=_as_int("SEARCH_LIMIT_MAX", 200),
        import_trace=_as_bool(os.getenv("IMPORT_TRACE")),
        import_trace_path=os.getenv("IMPORT_TRACE_PATH", "logs/import_batches.jsonl"),
    )
