from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import ResolvedDay
from ..core.time import to_jdn

AttrFunc = Callable[[ResolvedDay], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(day: ResolvedDay, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](day))
    return out

# helper for attribute implementations
def jdn(day: ResolvedDay) -> int:
    return to_jdn(day.date)
