"""Named day attributes computed on request from a DayInfo."""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def attribute(name: str) -> Callable[[AttrFunc], AttrFunc]:
    def deco(fn: AttrFunc) -> AttrFunc:
        if name in _REGISTRY:
            raise KeyError(f"Attribute '{name}' already registered")
        _REGISTRY[name] = fn
        return fn
    return deco

def attribute_names() -> List[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    unknown = [n for n in names if n not in _REGISTRY]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {attribute_names()}")
    out: Dict[str, Any] = {}
    for name in names:
        out.update(_REGISTRY[name](info))
    return out
