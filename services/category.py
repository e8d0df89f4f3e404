from __future__ import annotations

from typing import Any, Optional


CATEGORIES = ("videographer", "influencer", "model", "editor")
DEFAULT_CATEGORY = "videographer"

# Substring keywords, English and Greek (already lowercased)
INFLUENCER_KEYWORDS = ("influencer", "ινφλουένσερ", "ινφλουενσερ", "content creator")
VIDEOGRAPHER_KEYWORDS = ("videographer", "βιντεογράφ", "βιντεογραφ")
EDITOR_KEYWORDS = ("editor", "συντακτ", "συντάκτ", "μοντέρ", "μονταζ", "μοντάζ")
MODEL_KEYWORDS = ("model", "μοντέλ", "μοντελ")


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def _mentions(text: str, keywords: tuple[str, ...]) -> bool:
    return bool(text) and any(k in text for k in keywords)


def derive_category(
    category_raw: Any,
    main_role_raw: Any = None,
    form_name_raw: Any = None,
    override: Optional[str] = None,
) -> str:
    """Resolve the stored category for one sheet row.

    The category cell is unreliable in lead-form exports, so the main-role
    answer and the form name are consulted too. Precedence: influencer,
    videographer, editor, videographer+editor role, model (category cell
    only), then the raw category text, then ``videographer``.
    """
    if override:
        return _clean(override)

    category = _clean(category_raw)
    role = _clean(main_role_raw)
    form_name = _clean(form_name_raw)
    signals = (category, role, form_name)

    if any(_mentions(s, INFLUENCER_KEYWORDS) for s in signals):
        return "influencer"
    if any(_mentions(s, VIDEOGRAPHER_KEYWORDS) for s in signals):
        return "videographer"
    if any(_mentions(s, EDITOR_KEYWORDS) for s in signals):
        return "editor"
    if _mentions(role, VIDEOGRAPHER_KEYWORDS) and _mentions(role, EDITOR_KEYWORDS):
        return "videographer"
    if _mentions(category, MODEL_KEYWORDS):
        return "model"
    return category or DEFAULT_CATEGORY
