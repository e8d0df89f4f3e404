from __future__ import annotations

from services.column_mapping import (
    build_column_index,
    normalize_header,
    unmapped_headers,
)


LEAD_FORM_HEADERS = [
    "id",
    "created_time",
    "ad_id",
    "ad_name",
    "form_id",
    "form_name",
    "is_organic",
    "platform",
    "ποιος_είναι_ο_βασικός_σου_ρόλος;",
    "σε_ποια_πόλη_ή_περιοχή;",
    "link_σε_portfolio_/_vimeo_/_drive",
    "ονοματεπώνυμο",
    "email",
    "αριθμός_τηλεφώνου",
]


def test_header_with_trailing_punctuation_maps_to_location():
    index = build_column_index(["σε_ποια_πόλη_ή_περιοχή;"])
    assert index == {"location": 0}


def test_normalize_header_strips_trailing_question_marks():
    assert normalize_header(" email? ") == "email"
    assert normalize_header("σε_ποια_πόλη_ή_περιοχή;") == "σε_ποια_πόλη_ή_περιοχή"
    assert normalize_header(None) == ""


def test_full_lead_form_export():
    index = build_column_index(LEAD_FORM_HEADERS)
    assert index["leadId"] == 0
    assert index["createdAt"] == 1
    assert index["formName"] == 5
    assert index["platform"] == 7
    assert index["mainRole"] == 8
    assert index["location"] == 9
    assert index["portfolioUrl"] == 10
    assert index["name"] == 11
    assert index["email"] == 12
    assert index["phone"] == 13


def test_id_column_requires_exact_match():
    index = build_column_index(["ad_id", "form_id", "lead_id"])
    assert "leadId" not in index


def test_form_name_column_requires_exact_match():
    index = build_column_index(["name", "form", "_name"])
    assert "formName" not in index
    assert build_column_index(["form_name"]) == {"formName": 0}


def test_plain_name_column_does_not_swallow_rows():
    from services.mapping import row_to_record

    index = build_column_index(["name", "σε_ποια_πόλη_ή_περιοχή", "επαγγελματικός_τίτλος"])
    imported = row_to_record(["Maria Editor", "Athens", "model"], index)
    assert imported is not None
    assert imported.record.form_name is None
    assert imported.record.category == "model"


def test_truncated_headers_still_match():
    index = build_column_index(["ποιος_είναι_ο_βασικός_σο", "link_σε_portfolio_/_vimec", "γιατί_σε_ενδιαφέρει_συνει"])
    assert index == {"mainRole": 0, "portfolioUrl": 1, "bio": 2}


def test_first_column_wins_for_duplicate_field():
    index = build_column_index(["email", "email", "link_σε_portfolio", "link_σε_portfolio_/_vimeo_/_drive"])
    assert index["email"] == 0
    assert index["portfolioUrl"] == 2


def test_blank_headers_match_nothing():
    assert build_column_index(["", None, "   "]) == {}


def test_unmapped_headers_are_reported():
    index = build_column_index(LEAD_FORM_HEADERS)
    assert unmapped_headers(LEAD_FORM_HEADERS, index) == ["ad_id", "ad_name", "form_id", "is_organic"]
