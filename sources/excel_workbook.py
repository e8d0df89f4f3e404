from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from sources.base import Row
from sources.registry import register


def frame_to_rows(df: pd.DataFrame) -> List[Row]:
    df = df.fillna("")
    return [[str(v) for v in row] for row in df.itertuples(index=False, name=None)]


class ExcelWorkbookSource:
    source_name = "excel_workbook"
    suffixes = (".xlsx", ".xlsm", ".xls")

    def read_rows(self, path: Path) -> List[Row]:
        # First sheet only; headers stay in row 0 so they go through column matching
        df = pd.read_excel(path, sheet_name=0, header=None, dtype=str, keep_default_na=False)
        return frame_to_rows(df)


def _register():
    for suffix in ExcelWorkbookSource.suffixes:
        register(suffix, ExcelWorkbookSource)


_register()
