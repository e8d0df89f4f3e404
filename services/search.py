from __future__ import annotations

from typing import Any, Dict, List, Optional

from config.settings import get_settings
from ports.store import DocumentStorePort
from services.location_search import normalize_search_term


def clamp_limit(limit: Optional[int]) -> int:
    settings = get_settings()
    if limit is None:
        limit = settings.search_limit_default
    return max(1, min(int(limit), settings.search_limit_max))


def search_professionals(
    store: DocumentStorePort,
    category: str,
    location_term: Any,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Professionals of ``category`` whose locationSearch contains the normalized term.

    Exact token membership only; no ranking.
    """
    token = normalize_search_term(location_term)
    cat = (category or "").strip().lower()
    if not token or not cat:
        return []
    return store.query(cat, token, clamp_limit(limit))
