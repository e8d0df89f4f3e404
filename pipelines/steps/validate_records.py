from __future__ import annotations

from data_validator import DataValidator
from pipelines.runner import RunContext


class ValidateRecords:
    def __init__(self) -> None:
        self.validator = DataValidator()

    def run(self, ctx: RunContext) -> RunContext:
        ctx.records = self.validator.validate_all_records(ctx.records or [])
        ctx.meta["validation_stats"] = self.validator.get_validation_stats()
        return ctx
