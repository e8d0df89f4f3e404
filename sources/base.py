from __future__ import annotations

from pathlib import Path
from typing import List, Protocol


Row = List[str]


class SheetSource(Protocol):
    source_name: str
    suffixes: tuple

    def read_rows(self, path: Path) -> List[Row]:
        """Return every row of the first sheet, header row included, cells as text."""
        ...
