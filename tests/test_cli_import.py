from __future__ import annotations

import json
import sqlite3
import sys
from typing import List

import pandas as pd
import pytest


HEADERS = [
    "id",
    "created_time",
    "form_name",
    "ποιος_είναι_ο_βασικός_σου_ρόλος;",
    "σε_ποια_πόλη_ή_περιοχή;",
    "ονοματεπώνυμο",
    "email",
]


def _run_cli_with_args(args_list: List[str]) -> int:
    """Run cli.py main() with provided argv in-process (no subprocess); returns exit code."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            return int(getattr(e, "code", 0) or 0)
        return 0
    finally:
        sys.argv = argv_backup


def _write_sheet(path, rows):
    pd.DataFrame(rows, columns=HEADERS).to_excel(path, index=False, engine="openpyxl")


def _sample_rows():
    return [
        ["abc/def", "2024-01-01", "Videographers GR", "videographer", "Αθήνα", "Maria", "maria@example.gr"],
        ["", "2024-01-02", "Videographers GR", "videographer, editor", "Βόλος", "Kostas", "kostas@example.gr"],
        ["", "", "", "", "", "", ""],
    ]


def test_import_writes_sqlite_and_is_idempotent(tmp_path, sqlite_env):
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())

    assert _run_cli_with_args(["import", str(sheet)]) == 0
    assert _run_cli_with_args(["import", str(sheet)]) == 0

    conn = sqlite3.connect(str(sqlite_env))
    try:
        cur = conn.cursor()
        cur.execute("SELECT id FROM professionals ORDER BY id")
        ids = [r[0] for r in cur.fetchall()]
        assert len(ids) == 2
        assert "abc_def" in ids
        assert any(i.startswith("lead_") for i in ids)
    finally:
        conn.close()


def test_search_after_import(tmp_path, sqlite_env, capsys):
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())
    assert _run_cli_with_args(["import", str(sheet)]) == 0
    capsys.readouterr()

    assert _run_cli_with_args(["search", "--category", "videographer", "--location", "Athens"]) == 0
    found = json.loads(capsys.readouterr().out)
    assert [d["id"] for d in found] == ["abc_def"]


def test_forced_category(tmp_path, sqlite_env):
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())
    assert _run_cli_with_args(["import", str(sheet), "--category", "model"]) == 0

    conn = sqlite3.connect(str(sqlite_env))
    try:
        cur = conn.cursor()
        cur.execute("SELECT DISTINCT category FROM professionals")
        assert [r[0] for r in cur.fetchall()] == ["model"]
    finally:
        conn.close()


def test_dry_run_prints_diagnostics_without_store(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())

    assert _run_cli_with_args(["import", "--dry-run", str(sheet)]) == 0
    out = capsys.readouterr().out
    assert "Mapped column index" in out
    assert '"location": 4' in out
    assert "Dry run done" in out


def test_missing_file_argument_exits_1(capsys):
    assert _run_cli_with_args(["import"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path, capsys):
    assert _run_cli_with_args(["import", str(tmp_path / "nope.xlsx")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_sheet_without_data_rows_exits_1(tmp_path, sqlite_env, capsys):
    sheet = tmp_path / "empty.xlsx"
    _write_sheet(sheet, [])
    assert _run_cli_with_args(["import", str(sheet)]) == 1
    assert "at least one data row" in capsys.readouterr().err


def test_missing_credentials_exits_1(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", str(tmp_path / "missing.json"))
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())
    assert _run_cli_with_args(["import", str(sheet)]) == 1
    assert "GOOGLE_APPLICATION_CREDENTIALS" in capsys.readouterr().err


def test_store_failure_exits_nonzero(tmp_path, sqlite_env, monkeypatch):
    sheet = tmp_path / "leads.xlsx"
    _write_sheet(sheet, _sample_rows())

    from db.repos import professionals_repo

    def _boom(self):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(professionals_repo.SqliteWriteBatch, "commit", _boom)
    assert _run_cli_with_args(["import", str(sheet)]) == 1


def test_normalize_command(capsys):
    assert _run_cli_with_args(["normalize", "Θεσσαλονίκη"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["term"] == "thessaloniki"
    assert "salonika" in out["locationSearch"]


@pytest.mark.parametrize(
    "name, value, fragment",
    [
        ("STORE_BACKEND", "mongo", "STORE_BACKEND"),
        ("IMPORT_BATCH_SIZE", "lots", "IMPORT_BATCH_SIZE"),
    ],
)
def test_bad_settings_exit_1_with_message(monkeypatch, capsys, name, value, fragment):
    monkeypatch.setenv(name, value)
    assert _run_cli_with_args(["normalize", "Αθήνα"]) == 1
    err = capsys.readouterr().err
    assert "Configuration error" in err
    assert fragment in err
