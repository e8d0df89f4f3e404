from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from models import ImportedRow
from pipelines.runner import RunContext
from ports.store import DocumentStorePort
from utils.import_trace import log_batch


logger = logging.getLogger(__name__)


def chunked(items: list, size: int) -> List[list]:
    return [items[i:i + size] for i in range(0, len(items), size)]


class PersistRecords:
    """Write mapped rows to the store, one commit per batch, strictly in order.

    A failed commit propagates; batches already committed stay written.
    """

    def __init__(
        self,
        store: DocumentStorePort,
        batch_size: int = 500,
        on_batch: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        self.store = store
        self.batch_size = max(1, batch_size)
        self.on_batch = on_batch

    def run(self, ctx: RunContext) -> RunContext:
        records: List[ImportedRow] = ctx.records or []
        total = len(records)
        written = 0
        upserted = 0
        inserted = 0

        for batch_no, chunk in enumerate(chunked(records, self.batch_size), start=1):
            started = time.monotonic()
            batch = self.store.batch()
            doc_ids: List[Optional[str]] = []
            split = {"upserted": 0, "inserted": 0}
            for imported in chunk:
                data = imported.record.to_document()
                if imported.doc_id:
                    batch.upsert(imported.doc_id, data)
                    doc_ids.append(imported.doc_id)
                    split["upserted"] += 1
                else:
                    doc_ids.append(batch.insert(data))
                    split["inserted"] += 1
            try:
                batch.commit()
            except Exception as exc:
                logger.error(
                    "Batch commit failed after %d/%d documents", written, total,
                    extra={"step": "persist_records", "status": "error", "batch": batch_no, "error": type(exc).__name__},
                )
                log_batch(
                    source_file=ctx.source_file or "",
                    batch_number=batch_no,
                    doc_ids=doc_ids,
                    written_total=written,
                    records_total=total,
                    status="error",
                    error=str(exc),
                    extras=split,
                )
                raise
            duration_ms = int((time.monotonic() - started) * 1000)
            written += len(chunk)
            upserted += split["upserted"]
            inserted += split["inserted"]
            logger.info(
                "Written %d/%d documents", written, total,
                extra={"step": "persist_records", "status": "ok", "batch": batch_no, "duration_ms": duration_ms},
            )
            log_batch(
                source_file=ctx.source_file or "",
                batch_number=batch_no,
                doc_ids=doc_ids,
                written_total=written,
                records_total=total,
                duration_ms=duration_ms,
                extras=split,
            )
            if self.on_batch:
                self.on_batch(written, total)

        ctx.meta["written_records"] = written
        ctx.meta["upserted_records"] = upserted
        ctx.meta["inserted_records"] = inserted
        return ctx
