from __future__ import annotations

import math
from typing import Any, Dict, Optional, Sequence

from models import ImportedRow, ProfessionalRecord
from services.category import DEFAULT_CATEGORY, derive_category
from services.lead_ids import record_key
from services.location_search import build_location_search


# Optional record fields copied from the sheet as trimmed text
OPTIONAL_FIELDS = (
    "bio",
    "portfolioUrl",
    "phone",
    "email",
    "createdAt",
    "platform",
    "mainRole",
    "collaborationType",
    "equipment",
    "formName",
)


def cell_text(value: Any) -> str:
    """Spreadsheet cell as text; blank, None and NaN become ''."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def trim_or_none(value: Any) -> Optional[str]:
    text = cell_text(value).strip()
    return text or None


def row_to_record(
    row: Sequence[Any],
    column_index: Dict[str, int],
    row_number: int = 0,
    category_override: Optional[str] = None,
) -> Optional[ImportedRow]:
    """Map one data row to an ImportedRow, or None for a blank row."""

    def get(field: str) -> Any:
        i = column_index.get(field)
        if i is None or i >= len(row):
            return None
        return row[i]

    category_raw = trim_or_none(get("category"))
    location = trim_or_none(get("location"))
    name = trim_or_none(get("name"))
    if not (name or location or category_raw):
        return None

    category = derive_category(
        category_raw,
        get("mainRole"),
        get("formName"),
        override=category_override,
    )

    fields: Dict[str, Any] = {
        "category": category or DEFAULT_CATEGORY,
        "location": location or "",
        "name": name or "",
    }
    location_search = build_location_search(location or "")
    if location_search:
        fields["locationSearch"] = location_search
    for field in OPTIONAL_FIELDS:
        value = trim_or_none(get(field))
        if value is not None:
            fields[field] = value

    record = ProfessionalRecord(**fields)
    doc_id = record_key(get("leadId"), record.created_at, record.email, record.name)
    return ImportedRow(row_number=row_number, doc_id=doc_id, record=record)
