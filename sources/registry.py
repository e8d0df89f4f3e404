from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union


_REGISTRY: Dict[str, Any] = {}


def register(suffix: str, factory) -> None:
    _REGISTRY[suffix.lower()] = factory


def get_source(suffix: str):
    key = suffix.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unsupported spreadsheet type: {suffix}")
    return _REGISTRY[key]()


def source_for_path(path: Union[str, Path]):
    return get_source(Path(path).suffix)


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)
