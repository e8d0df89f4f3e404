from __future__ import annotations

import hashlib
import re
from typing import Any, Optional


LEAD_ID_PREFIX = "lead_"
LEAD_ID_HASH_LENGTH = 20
_KEY_SEPARATOR = "|"

# Characters that break document paths or URLs
_UNSAFE_ID_RE = re.compile(r"[/\\#?%\s]")


def sanitize_doc_id(value: Any) -> Optional[str]:
    """Make an externally supplied lead id safe to use as a document key."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return _UNSAFE_ID_RE.sub("_", text)


def derive_lead_id(created_at: Optional[str], email: Optional[str], name: Optional[str]) -> str:
    """Stable key for rows without an id column.

    Same (createdAt, email, name) always gives the same key, so re-importing a
    sheet updates the existing documents instead of adding new ones.
    """
    material = _KEY_SEPARATOR.join([created_at or "", email or "", name or ""])
    digest = hashlib.sha256(material.encode("utf-8")).hexdigest()
    return f"{LEAD_ID_PREFIX}{digest[:LEAD_ID_HASH_LENGTH]}"


def record_key(
    lead_id: Any,
    created_at: Optional[str],
    email: Optional[str],
    name: Optional[str],
) -> Optional[str]:
    return sanitize_doc_id(lead_id) or derive_lead_id(created_at, email, name)
