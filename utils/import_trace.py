from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass


def log_batch(
    *,
    source_file: str,
    batch_number: int,
    doc_ids: List[Optional[str]],
    written_total: int,
    records_total: int,
    duration_ms: Optional[int] = None,
    status: str = "ok",
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing a committed batch if tracing is enabled.

    Controlled by IMPORT_TRACE / IMPORT_TRACE_PATH in config/settings.py
    """
    from config.settings import get_settings
    settings = get_settings()
    if not settings.import_trace:
        return

    log_path = Path(settings.import_trace_path)
    _ensure_parent_dir(log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "source_file": source_file,
        "batch": batch_number,
        "doc_ids": doc_ids,
        "written_total": written_total,
        "records_total": records_total,
        "duration_ms": duration_ms,
        "status": status,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id
    if extras:
        payload["extras"] = extras

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError:
        # Never break the import on trace failures
        return
