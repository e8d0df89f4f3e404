from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pipelines.runner import RunContext


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def print_dry_run(ctx: RunContext) -> None:
    """Print header resolution diagnostics for a dry run."""
    print("Headers (row 0):", _dump(ctx.headers))
    print("Mapped column index:", _dump(ctx.column_index))
    for field in ctx.meta.get("missing_fields") or []:
        print(f"WARNING: no column matched field '{field}'")
    unmapped = ctx.meta.get("unmapped_headers") or []
    if unmapped:
        print("Unmapped headers:", _dump(unmapped))
    if ctx.rows:
        print("First data row:", _dump(ctx.rows[0]))
    if ctx.records:
        first = ctx.records[0]
        print("First record:", _dump({"id": first.doc_id, **first.record.to_document()}))
    print(f"Rows that would be imported: {len(ctx.records)} (blank rows skipped: {ctx.meta.get('skipped_blank_rows', 0)})")
    print("Dry run done. Run without --dry-run and GOOGLE_APPLICATION_CREDENTIALS to import.")


def print_import_summary(ctx: RunContext, backend: Optional[str] = None) -> None:
    """Print summary of an import run."""
    meta: Dict[str, Any] = ctx.meta
    stats = meta.get("validation_stats") or {}

    print("\n" + "="*60)
    print("PROFESSIONALS IMPORT - SUMMARY")
    print("="*60)
    print(f"Source File: {ctx.source_file or 'N/A'}")
    if backend:
        print(f"Store: {backend}")
    missing = meta.get("missing_fields") or []
    if missing:
        print(f"Unmatched Key Fields: {', '.join(missing)}")
    print(f"Data Rows: {meta.get('data_rows', 0)}")
    print(f"Blank Rows Skipped: {meta.get('skipped_blank_rows', 0)}")
    print(f"Documents Written: {meta.get('written_records', 0)}")
    print(f"  Upserted by key: {meta.get('upserted_records', 0)}")
    print(f"  Inserted new: {meta.get('inserted_records', 0)}")
    print(f"Rows With Warnings: {stats.get('records_with_warnings', 0)}")
    print(f"Duplicate Keys In Sheet: {stats.get('duplicate_keys', 0)}")
    print("="*60)
