from __future__ import annotations

from services.lead_ids import (
    LEAD_ID_HASH_LENGTH,
    LEAD_ID_PREFIX,
    derive_lead_id,
    record_key,
    sanitize_doc_id,
)


def test_slash_in_lead_id_is_sanitized():
    assert sanitize_doc_id("abc/def") == "abc_def"
    assert record_key("abc/def", "2024-01-01", "a@b.gr", "Maria") == "abc_def"


def test_blank_lead_id_falls_back_to_hash():
    key = record_key("  ", "2024-01-01T10:00:00", "maria@example.gr", "Maria P")
    assert key == derive_lead_id("2024-01-01T10:00:00", "maria@example.gr", "Maria P")


def test_derived_id_is_stable_and_prefixed():
    a = derive_lead_id("2024-01-01T10:00:00", "maria@example.gr", "Maria P")
    b = derive_lead_id("2024-01-01T10:00:00", "maria@example.gr", "Maria P")
    assert a == b
    assert a.startswith(LEAD_ID_PREFIX)
    assert len(a) == len(LEAD_ID_PREFIX) + LEAD_ID_HASH_LENGTH


def test_derived_id_changes_with_any_field():
    base = derive_lead_id("t", "e", "n")
    assert derive_lead_id("t2", "e", "n") != base
    assert derive_lead_id("t", "e2", "n") != base
    assert derive_lead_id("t", "e", "n2") != base


def test_missing_fields_default_to_empty():
    assert derive_lead_id(None, None, None) == derive_lead_id("", "", "")


def test_separator_keeps_fields_apart():
    assert derive_lead_id("ab", "c", "") != derive_lead_id("a", "bc", "")
