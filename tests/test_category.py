from __future__ import annotations

import pytest

from services.category import derive_category


def test_videographer_and_editor_role_resolves_to_videographer():
    assert derive_category("", "videographer, editor") == "videographer"


@pytest.mark.parametrize(
    "category, role, form_name, expected",
    [
        ("", "Influencer", "", "influencer"),
        ("Βιντεογράφος", "", "", "videographer"),
        ("", "editor", "", "editor"),
        ("Συντάκτης", "", "", "editor"),
        ("Model", "", "", "model"),
        ("", "", "Influencers Athens form", "influencer"),
        ("Videographer", "influencer", "", "influencer"),
        ("model", "editor", "", "editor"),
        ("  Photographer ", "", "", "photographer"),
        ("", "", "", "videographer"),
    ],
)
def test_category_precedence(category, role, form_name, expected):
    assert derive_category(category, role, form_name) == expected


def test_model_only_read_from_category_cell():
    assert derive_category("", "model", "") == "videographer"


def test_override_short_circuits_signals():
    assert derive_category("Influencer", "videographer", "", override=" Model ") == "model"


def test_none_cells_are_blank():
    assert derive_category(None, None, None) == "videographer"
