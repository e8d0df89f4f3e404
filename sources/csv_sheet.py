from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from sources.base import Row
from sources.excel_workbook import frame_to_rows
from sources.registry import register


class CsvSheetSource:
    source_name = "csv_sheet"
    suffixes = (".csv",)

    def read_rows(self, path: Path) -> List[Row]:
        try:
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, encoding="utf-8-sig")
        except pd.errors.EmptyDataError:
            return []
        return frame_to_rows(df)


def _register():
    register(".csv", CsvSheetSource)


_register()
