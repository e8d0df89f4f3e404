from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


# Greek to Latin (Greeklish) used for both stored tokens and query terms
GREEK_TO_LATIN: Mapping[str, str] = MappingProxyType({
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "i", "θ": "th",
    "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o", "π": "p",
    "ρ": "r", "σ": "s", "ς": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps",
    "ω": "o",
    "ά": "a", "έ": "e", "ή": "i", "ί": "i", "ό": "o", "ύ": "y", "ώ": "o",
    "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y",
    "Α": "a", "Β": "v", "Γ": "g", "Δ": "d", "Ε": "e", "Ζ": "z", "Η": "i", "Θ": "th",
    "Ι": "i", "Κ": "k", "Λ": "l", "Μ": "m", "Ν": "n", "Ξ": "x", "Ο": "o", "Π": "p",
    "Ρ": "r", "Σ": "s", "Τ": "t", "Υ": "y", "Φ": "f", "Χ": "ch", "Ψ": "ps", "Ω": "o",
    "Ά": "a", "Έ": "e", "Ή": "i", "Ί": "i", "Ό": "o", "Ύ": "y", "Ώ": "o",
    "Ϊ": "i", "Ϋ": "y",
})

# Replaced with a space so "Athens," and "Athens" end up as the same token.
# Includes the Greek question mark (U+037E) and ano teleia (U+0387).
PUNCTUATION = ".,;:!?()[]{}\"'\u00ab\u00bb\u00b7\u037e\u0387"
_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
_WS_RE = re.compile(r"\s+")
_WORD_SPLIT_RE = re.compile(r"[\s,]+")

# Canonical place token -> equivalent spellings added to locationSearch.
# Greek-script keys are normalized when the table is built.
_ALIAS_SOURCE: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("athina", ("athens", "athina")),
    ("αθηνα", ("athens", "athina")),
    ("athens", ("athens", "athina")),
    ("peiraias", ("piraeus", "peiraias", "pireas")),
    ("pireas", ("piraeus", "peiraias", "pireas")),
    ("thessaloniki", ("thessaloniki", "salonika")),
    ("θεσσαλονικη", ("thessaloniki", "salonika")),
    ("kefalonia", ("kefalonia", "cefalonia")),
    ("κεφαλονια", ("kefalonia", "cefalonia")),
    ("argostoli", ("argostoli",)),
    ("patra", ("patras", "patra")),
    ("πατρα", ("patras", "patra")),
    ("irakleio", ("heraklion", "irakleio", "crete")),
    ("ηρακλειο", ("heraklion", "irakleio", "crete")),
    ("chania", ("chania", "hania", "crete")),
    ("larisa", ("larissa", "larisa")),
    ("λαρισα", ("larissa", "larisa")),
    ("volos", ("volos",)),
    ("ioannina", ("ioannina", "giannena")),
    ("kerkyra", ("corfu", "kerkyra")),
    ("rodos", ("rhodes", "rodos")),
)


def _normalize_text(value: str) -> str:
    s = _WS_RE.sub(" ", value.strip().lower())
    s = _PUNCT_RE.sub(" ", s)
    s = "".join(GREEK_TO_LATIN.get(ch, ch) for ch in s)
    return _WS_RE.sub(" ", s).strip()


def normalize_location_token(value: Any) -> str:
    """Lowercase, de-punctuate and transliterate a location string to ASCII Greeklish.

    Characters without a Greek mapping pass through unchanged. Applying the
    function to its own output returns the same string.
    """
    if not isinstance(value, str):
        return ""
    return _normalize_text(value)


def _build_alias_table() -> Mapping[str, Tuple[str, ...]]:
    table: Dict[str, Tuple[str, ...]] = {}
    for key, aliases in _ALIAS_SOURCE:
        norm_key = _normalize_text(key)
        merged = list(table.get(norm_key, ()))
        for alias in aliases:
            if alias not in merged:
                merged.append(alias)
        table[norm_key] = tuple(merged)
    return MappingProxyType(table)


LOCATION_ALIASES: Mapping[str, Tuple[str, ...]] = _build_alias_table()


def _alias_triggered(key: str, full: str, words: List[str]) -> bool:
    if key in full:
        return True
    # Loose on purpose: partial input like "thess" still expands
    return any(w == key or w in key or key in w for w in words)


def build_location_search(location: Any) -> List[str]:
    """Return the ordered, de-duplicated token list stored as ``locationSearch``.

    The list holds the fully normalized location, every normalized word and the
    aliases of any known place the input mentions.
    """
    if not isinstance(location, str):
        return []
    trimmed = location.strip()
    if not trimmed:
        return []

    full = normalize_location_token(trimmed)
    words = [t for t in (normalize_location_token(w) for w in _WORD_SPLIT_RE.split(trimmed)) if t]

    tokens: List[str] = []
    seen = set()

    def _add(token: str) -> None:
        if token and token not in seen:
            seen.add(token)
            tokens.append(token)

    _add(full)
    for w in words:
        _add(w)
    for key, aliases in LOCATION_ALIASES.items():
        if _alias_triggered(key, full, words):
            for alias in aliases:
                _add(alias)
    return tokens


def normalize_search_term(term: Any) -> str:
    """Query-side form of a user-typed location, matched against ``locationSearch``."""
    return normalize_location_token(term)
