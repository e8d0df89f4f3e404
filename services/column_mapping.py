from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Sequence


class ColumnCandidate(NamedTuple):
    sheet_column: str
    field: str
    exact: bool = False


# Order matters: the first candidate a header matches decides its field, and
# truncated export headers ("..._σο", "..._vimec") rely on that.
COLUMN_MAPPING: tuple[ColumnCandidate, ...] = (
    ColumnCandidate("id", "leadId", exact=True),
    ColumnCandidate("created_time", "createdAt"),
    ColumnCandidate("form_name", "formName", exact=True),
    ColumnCandidate("platform", "platform"),
    ColumnCandidate("ποιος_είναι_ο_βασικός_σου_ρόλος", "mainRole"),
    ColumnCandidate("ποιος_είναι_ο_βασικός_σο", "mainRole"),
    ColumnCandidate("τι_είδους_συνεργασία_σε", "collaborationType"),
    ColumnCandidate("σε_ποια_πόλη_ή_περιοχή", "location"),
    ColumnCandidate("τι_εξοπλισμό_χρησιμοποιεί", "equipment"),
    ColumnCandidate("link_σε_portfolio_/_vimeo_/_drive", "portfolioUrl"),
    ColumnCandidate("link_σε_portfolio_/_vimec", "portfolioUrl"),
    ColumnCandidate("link_σε_portfolio", "portfolioUrl"),
    ColumnCandidate("γιατί_σε_ενδιαφέρει_συνεργασία_με_την_itdev", "bio"),
    ColumnCandidate("γιατί_σε_ενδιαφέρει_συνει", "bio"),
    ColumnCandidate("ονοματεπώνυμο", "name"),
    ColumnCandidate("αριθμός_τηλεφώνου", "phone"),
    ColumnCandidate("email", "email"),
    ColumnCandidate("επαγγελματικός_τίτλος", "category"),
)

# ASCII ";" and "?" plus the Greek question mark (U+037E)
TRAILING_PUNCTUATION = ";?\u037e"


def normalize_header(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().rstrip(TRAILING_PUNCTUATION).strip()


def header_matches(header: str, candidate: ColumnCandidate) -> bool:
    """Loose header test: equal, prefix either way, or substring either way.

    Exact candidates (the lead id and form name columns) only accept equality,
    so ``id`` never captures ``ad_id`` and a plain ``name`` header is not taken
    for ``form_name``.
    """
    if not header:
        return False
    expected = normalize_header(candidate.sheet_column)
    if candidate.exact:
        return header == expected
    return (
        header == expected
        or header.startswith(expected)
        or expected.startswith(header)
        or expected in header
        or header in expected
    )


def build_column_index(headers: Sequence[Any]) -> Dict[str, int]:
    """Map record field -> column position for a header row.

    Each header goes to the first candidate it matches; if that field already
    has a column the header is ignored (first column wins).
    """
    index: Dict[str, int] = {}
    for i, raw in enumerate(headers):
        header = normalize_header(raw)
        for candidate in COLUMN_MAPPING:
            if header_matches(header, candidate):
                if candidate.field not in index:
                    index[candidate.field] = i
                break
    return index


def unmapped_headers(headers: Sequence[Any], column_index: Dict[str, int]) -> List[str]:
    used = set(column_index.values())
    return [normalize_header(h) for i, h in enumerate(headers) if i not in used and normalize_header(h)]
