from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.mapping import row_to_record


logger = logging.getLogger(__name__)


class MapRows:
    def run(self, ctx: RunContext) -> RunContext:
        records = []
        skipped = 0
        # Sheet row numbers are 1-based and row 1 is the header
        for offset, row in enumerate(ctx.rows):
            imported = row_to_record(
                row,
                ctx.column_index,
                row_number=offset + 2,
                category_override=ctx.category_override,
            )
            if imported is None:
                skipped += 1
                continue
            records.append(imported)
        ctx.records = records
        ctx.meta["mapped_records"] = len(records)
        ctx.meta["skipped_blank_rows"] = skipped
        logger.info(
            "Mapped %d rows, skipped %d blank", len(records), skipped,
            extra={"step": "map_rows", "status": "ok"},
        )
        return ctx
