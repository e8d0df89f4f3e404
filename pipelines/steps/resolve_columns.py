from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.column_mapping import build_column_index, unmapped_headers


logger = logging.getLogger(__name__)

# Without either of these every row is dropped as blank
KEY_FIELDS = ("name", "location")


class ResolveColumns:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.column_index = build_column_index(ctx.headers)
        ctx.meta["unmapped_headers"] = unmapped_headers(ctx.headers, ctx.column_index)
        missing = [f for f in KEY_FIELDS if f not in ctx.column_index]
        ctx.meta["missing_fields"] = missing
        for field in missing:
            logger.warning(
                "No column matched field %s", field,
                extra={"step": "resolve_columns", "status": "missing"},
            )
        logger.info(
            "Resolved %d of %d headers", len(ctx.column_index), len(ctx.headers),
            extra={"step": "resolve_columns", "status": "ok"},
        )
        return ctx
