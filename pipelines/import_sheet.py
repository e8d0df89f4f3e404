from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from config.settings import Settings
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.map_rows import MapRows
from pipelines.steps.persist_records import PersistRecords
from pipelines.steps.resolve_columns import ResolveColumns
from pipelines.steps.validate_records import ValidateRecords
from ports.store import DocumentStorePort
from sources.registry import source_for_path


class ImportUsageError(Exception):
    """Missing or unusable command input (file, credentials, sheet type)."""


class SheetFormatError(Exception):
    """The sheet cannot be imported as-is (e.g. no data rows)."""


def resolve_input_path(file_path: Optional[str]) -> Path:
    if not file_path:
        raise ImportUsageError("Usage: cli.py import [--dry-run] [--category CATEGORY] <path-to-file.xlsx>")
    path = Path(file_path).expanduser().resolve()
    if not path.is_file():
        raise ImportUsageError(f"File not found: {path}")
    return path


def load_sheet(path: Path) -> Tuple[list, List[list]]:
    """Return (header row, data rows) from the first sheet of ``path``."""
    try:
        import sources  # noqa: F401 ensure registration
        source = source_for_path(path)
    except KeyError as exc:
        raise ImportUsageError(str(exc.args[0])) from exc
    rows = source.read_rows(path)
    if len(rows) < 2:
        raise SheetFormatError("Sheet must have a header row and at least one data row.")
    return rows[0], rows[1:]


def require_credentials(settings: Settings) -> Path:
    cred = settings.credentials_path
    path = Path(cred).expanduser().resolve() if cred else None
    if path is None or not path.is_file():
        raise ImportUsageError(
            "Set GOOGLE_APPLICATION_CREDENTIALS to your Firebase service account JSON path."
        )
    return path


def build_context(path: Path, category_override: Optional[str] = None) -> RunContext:
    headers, rows = load_sheet(path)
    ctx = RunContext()
    ctx.source_file = str(path)
    ctx.category_override = category_override
    ctx.headers = list(headers)
    ctx.rows = list(rows)
    ctx.meta["data_rows"] = len(rows)
    return ctx


def run_dry_run(ctx: RunContext) -> RunContext:
    """Resolve headers and map rows without touching any store."""
    return Pipeline([
        ResolveColumns(),
        MapRows(),
        ValidateRecords(),
    ]).run(ctx)


def run_import(
    ctx: RunContext,
    store: DocumentStorePort,
    batch_size: int,
    on_batch: Optional[Callable[[int, int], None]] = None,
) -> RunContext:
    return Pipeline([
        ResolveColumns(),
        MapRows(),
        ValidateRecords(),
        PersistRecords(store, batch_size=batch_size, on_batch=on_batch),
    ]).run(ctx)
