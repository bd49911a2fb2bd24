"""Read fighter metadata out of loosely-shaped records.

Catalog rows, joined builds and generated enemies all spell the bit type,
height and name differently; these helpers check each known location in
turn and fall back to safe defaults.
"""
from __future__ import annotations
from typing import Any, Mapping, Optional

from bladearena.core.types import ARCHETYPES, BitType
from .models import DEFAULT_STAT, FighterMeta

FALLBACK_BIT_TYPE: BitType = "balance"


def _dig(source: Mapping[str, Any], *path: str) -> Any:
    cur: Any = source
    for key in path:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur


def _first(source: Mapping[str, Any], *paths: tuple[str, ...]) -> Any:
    for path in paths:
        val = _dig(source, *path)
        if val is not None:
            return val
    return None


def read_bit_type_from(source: Mapping[str, Any]) -> BitType:
    possible = _first(
        source,
        ("bit_type",),
        ("bitType",),
        ("bit", "type"),
        ("build", "bit", "type"),
        ("build", "bit_type"),
    )
    low = str(possible if possible is not None else FALLBACK_BIT_TYPE).lower()
    return low if low in ARCHETYPES else FALLBACK_BIT_TYPE  # type: ignore[return-value]


def read_height_from(source: Mapping[str, Any]) -> float:
    h = _first(source, ("height",), ("blade", "height"), ("build", "blade", "height"))
    if isinstance(h, bool) or not isinstance(h, (int, float)) or h <= 0:
        return DEFAULT_STAT
    return h


def read_name_from(source: Mapping[str, Any], fallback: str) -> str:
    name: Optional[str] = _first(source, ("blade", "name"), ("build", "blade", "name"), ("name",))
    return name if name is not None else fallback


def make_meta_from(source: Mapping[str, Any], fallback_name: str) -> FighterMeta:
    return FighterMeta(
        bit_type=read_bit_type_from(source),
        height=read_height_from(source),
        display_name=read_name_from(source, fallback_name),
    )

__all__ = ["read_bit_type_from","read_height_from","read_name_from","make_meta_from"]
