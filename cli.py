import argparse
import dataclasses
import json
import logging
import os
import sys
import uuid as _uuid

from config.settings import get_settings
from db import schema
from db.connection import get_connection, get_store
from pipelines.import_sheet import (
    ImportUsageError,
    SheetFormatError,
    build_context,
    require_credentials,
    resolve_input_path,
    run_dry_run,
    run_import,
)
from services.location_search import build_location_search, normalize_search_term
from services.reporting import print_dry_run, print_import_summary
from services.search import search_professionals
from utils.logging_setup import init_logging


logger = logging.getLogger("cli")


def _settings_for(args):
    settings = get_settings()
    if getattr(args, "db", None):
        settings = dataclasses.replace(settings, db_path=args.db)
    return settings


def cmd_bootstrap(args):
    settings = _settings_for(args)
    conn = get_connection(settings.db_path)
    schema.bootstrap(conn)
    conn.close()
    print("Schema ready")


def cmd_import(args):
    settings = _settings_for(args)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    path = resolve_input_path(args.file)
    ctx = build_context(path, category_override=args.category)

    if args.dry_run:
        ctx = run_dry_run(ctx)
        print_dry_run(ctx)
        return

    if settings.store_backend == "firestore":
        require_credentials(settings)
    store = get_store(settings)

    def _progress(written, total):
        print(f"Written {written}/{total} documents.")

    ctx = run_import(ctx, store, settings.batch_size, on_batch=_progress)
    print_import_summary(ctx, settings.store_backend)
    print(f"Import complete. Total documents written: {ctx.meta.get('written_records', 0)}")


def cmd_search(args):
    settings = _settings_for(args)
    store = get_store(settings)
    results = search_professionals(store, args.category, args.location, args.limit)
    print(json.dumps(results, indent=2, ensure_ascii=False))


def cmd_normalize(args):
    out = {
        "term": normalize_search_term(args.text),
        "locationSearch": build_location_search(args.text),
    }
    print(json.dumps(out, indent=2, ensure_ascii=False))


def main():
    try:
        settings = get_settings()
    except RuntimeError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Professionals lookup CLI")
    parser.add_argument("--db", default=None, help="Path to SQLite DB when STORE_BACKEND=sqlite (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create the local SQLite document tables")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_imp = sub.add_parser("import", help="Import professionals from an Excel/CSV export")
    p_imp.add_argument("file", nargs="?", help="Path to .xlsx/.xls/.csv file (first sheet is read)")
    p_imp.add_argument("--dry-run", action="store_true", help="Resolve headers and print diagnostics; no store writes")
    p_imp.add_argument("--category", default=None, help="Force this category for every row")
    p_imp.set_defaults(func=cmd_import)

    p_search = sub.add_parser("search", help="Find professionals by category and location")
    p_search.add_argument("--category", "-c", required=True, help="videographer | influencer | model | editor")
    p_search.add_argument("--location", "-l", required=True, help="Free-text location (Greek, Greeklish or English)")
    p_search.add_argument("--limit", type=int, default=None, help="Max results (default from settings)")
    p_search.set_defaults(func=cmd_search)

    p_norm = sub.add_parser("normalize", help="Show the search tokens produced for a location")
    p_norm.add_argument("text", help="Location text")
    p_norm.set_defaults(func=cmd_normalize)

    args = parser.parse_args()
    try:
        args.func(args)
    except (ImportUsageError, SheetFormatError) as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Command failed", extra={"step": args.cmd, "status": "error"})
        sys.exit(1)


if __name__ == "__main__":
    main()
